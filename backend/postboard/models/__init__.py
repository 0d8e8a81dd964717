"""SQLAlchemy models exposed for metadata creation and imports."""
from .post import Post
from .user import User

__all__ = ["User", "Post"]
