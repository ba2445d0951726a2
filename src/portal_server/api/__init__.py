"""API routers."""

from .episodes import router as episodes_router
from .stats import router as stats_router

__all__ = ["episodes_router", "stats_router"]
