"""FastAPI server integration."""

from .app import create_app
from .routes import RunQueryRequest, StartChallengeRequest, register_quest_routes

__all__ = [
    "create_app",
    "RunQueryRequest",
    "StartChallengeRequest",
    "register_quest_routes",
]
