from .species import (
    CatalogSearchPage,
    CatalogSpeciesDetails,
    CatalogSpeciesSummary,
    HardinessZones,
    SpeciesImage,
    WateringBenchmark,
)

__all__ = [
    "CatalogSearchPage",
    "CatalogSpeciesDetails",
    "CatalogSpeciesSummary",
    "HardinessZones",
    "SpeciesImage",
    "WateringBenchmark",
]
