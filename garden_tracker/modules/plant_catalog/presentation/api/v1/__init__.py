from .catalog import catalog_router

__all__ = ["catalog_router"]
