# 📄 File: garden_tracker/modules/plant_catalog/presentation/api/schemas/catalog_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shapes of what the plant search page receives: search hits, a species
# entry, and the result of adding a species to the garden.
#
# 🧪 Purpose (Technical Summary):
# Pydantic response schemas for the catalog API, built from catalog domain
# models and the import result.
#
# 🔗 Dependencies:
# - pydantic
# - plant_management PlantResponse (embedded in the import response)
#
# 🔄 Connected Modules / Calls From:
# - plant_catalog.presentation.api.v1.catalog

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel

from garden_tracker.modules.plant_management.presentation.api.schemas.plant_schemas import (
    PlantResponse,
)

from ....application.handlers.catalog_handlers import ImportResult
from ....domain.models.species import (
    CatalogSearchPage,
    CatalogSpeciesDetails,
    CatalogSpeciesSummary,
    HardinessZones,
    SpeciesImage,
    WateringBenchmark,
)
from ....domain.services.import_mapper import estimated_frequency_for


class SpeciesSummaryResponse(BaseModel):
    id: int
    common_name: Optional[str] = None
    scientific_name: List[str] = []
    cycle: Optional[str] = None
    watering: Optional[str] = None
    thumbnail_url: Optional[str] = None

    @classmethod
    def from_domain(cls, summary: CatalogSpeciesSummary) -> "SpeciesSummaryResponse":
        return cls(**summary.model_dump(include=set(cls.model_fields)))


class SpeciesSearchResponse(BaseModel):
    """One page of search hits."""

    results: List[SpeciesSummaryResponse]
    page: int
    last_page: int
    total: Optional[int] = None
    has_next: bool

    @classmethod
    def from_domain(cls, search_page: CatalogSearchPage) -> "SpeciesSearchResponse":
        return cls(
            results=[SpeciesSummaryResponse.from_domain(item) for item in search_page.results],
            page=search_page.page,
            last_page=search_page.last_page,
            total=search_page.total,
            has_next=search_page.has_next,
        )


class SpeciesDetailsResponse(BaseModel):
    """A species entry, with the frequency an import would use."""

    id: int
    common_name: Optional[str] = None
    scientific_name: List[str] = []
    family: Optional[str] = None
    type: Optional[str] = None
    cycle: Optional[str] = None
    description: Optional[str] = None
    sunlight: Union[List[str], str, None] = None
    watering: Optional[str] = None
    watering_general_benchmark: Optional[WateringBenchmark] = None
    care_level: Optional[str] = None
    maintenance: Optional[str] = None
    hardiness: Optional[HardinessZones] = None
    default_image: Optional[SpeciesImage] = None
    indoor: Optional[bool] = None
    estimated_watering_frequency_days: Optional[int] = None

    @classmethod
    def from_domain(cls, details: CatalogSpeciesDetails) -> "SpeciesDetailsResponse":
        return cls(
            **details.model_dump(exclude={"other_name"}),
            estimated_watering_frequency_days=estimated_frequency_for(details),
        )


class ImportSpeciesResponse(BaseModel):
    """The plant created from a catalog species."""

    plant: PlantResponse
    species_id: int
    message: str

    @classmethod
    def from_result(cls, result: ImportResult, now: datetime) -> "ImportSpeciesResponse":
        return cls(
            plant=PlantResponse.from_domain(result.plant, now),
            species_id=result.species_id,
            message=result.message,
        )
