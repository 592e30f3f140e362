from .catalog_handlers import (
    GetSpeciesDetailsQueryHandler,
    ImportResult,
    ImportSpeciesCommandHandler,
    SearchSpeciesQueryHandler,
    describe_estimated_schedule,
)

__all__ = [
    "GetSpeciesDetailsQueryHandler",
    "ImportResult",
    "ImportSpeciesCommandHandler",
    "SearchSpeciesQueryHandler",
    "describe_estimated_schedule",
]
