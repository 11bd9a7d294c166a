"""ASGI application factory and dependencies for the spicerack server."""

from spicerack.server.app import app, create_app

__all__ = ["app", "create_app"]
