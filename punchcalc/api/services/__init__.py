"""Services backing the API routers."""

from punchcalc.api.services.session_manager import (
    PunchSession,
    PunchSessionManager,
    get_session_manager,
)

__all__ = ["PunchSession", "PunchSessionManager", "get_session_manager"]
