from .diagnostics import diagnostics_router
from .plants import plants_router

__all__ = ["diagnostics_router", "plants_router"]
