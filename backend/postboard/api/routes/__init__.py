"""Route modules for the Postboard API."""
from . import auth, posts, users

__all__ = ["auth", "posts", "users"]
