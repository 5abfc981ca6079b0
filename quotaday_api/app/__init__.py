"""
Application package initializer.

The project is organised into a few small pieces: ``core`` holds
configuration, logging, error types and middleware, ``schemas`` the
pydantic models, ``services`` the quote store and its renderers, and
``api`` the versioned routers that expose them.
"""

from .main import app, create_app  # noqa: F401
