"""Postboard: a small blog-post REST backend with JWT authentication."""

__version__ = "0.1.0"
