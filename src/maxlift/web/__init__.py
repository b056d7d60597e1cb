"""Web API for maxlift."""

from .app import create_app

__all__ = ["create_app"]
