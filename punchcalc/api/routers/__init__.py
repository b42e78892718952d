"""API routers for different resource types."""

from punchcalc.api.routers.punch import router as punch_router
from punchcalc.api.routers.punch_websocket import router as punch_websocket_router
from punchcalc.api.routers.static import router as static_router

__all__ = [
    "punch_router",
    "punch_websocket_router",
    "static_router",
]
