"""Run the API with uvicorn: ``python -m postboard [port]``."""
from __future__ import annotations

import sys

from uvicorn import run

from postboard.core.config import get_settings


if __name__ == "__main__":
    port = int(sys.argv[1]) if len(sys.argv) > 1 else 8000
    run("postboard.main:app", host="0.0.0.0", port=port, log_level=get_settings().log_level.lower())
