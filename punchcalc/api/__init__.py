"""Punch Calculator API package - FastAPI backend for the punch visualizer."""

from punchcalc.api.main import app, create_app

__all__ = ["app", "create_app"]
