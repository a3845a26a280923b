"""
API Module.

FastAPI application exposing unlock, mark and task configuration.
"""

from prompt_marker.api.app import create_app

__all__ = ["create_app"]
