"""
pokerround Server - FastAPI HTTP Layer
"""

from pokerround.server.app import app, create_app

__all__ = ["app", "create_app"]
