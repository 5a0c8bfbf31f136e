"""HTTP Controllers."""

from ecosort.presentation.http.controllers.health import router as health_router
from ecosort.presentation.http.controllers.history import router as history_router
from ecosort.presentation.http.controllers.scan import router as scan_router
from ecosort.presentation.http.controllers.tips import router as tips_router

__all__ = ["health_router", "history_router", "scan_router", "tips_router"]
