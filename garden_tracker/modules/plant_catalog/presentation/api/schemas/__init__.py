from .catalog_schemas import (
    ImportSpeciesResponse,
    SpeciesDetailsResponse,
    SpeciesSearchResponse,
    SpeciesSummaryResponse,
)

__all__ = [
    "ImportSpeciesResponse",
    "SpeciesDetailsResponse",
    "SpeciesSearchResponse",
    "SpeciesSummaryResponse",
]
