"""Web interface for gymtopia-stats."""

from .app import create_app

__all__ = ["create_app"]
