# 📄 File: garden_tracker/modules/plant_catalog/domain/models/species.py
# 🧭 Purpose (Layman Explanation):
# Describes what the plant encyclopedia tells us about a species: its names,
# description, light needs, hardiness and how often it likes water.
# 🧪 Purpose (Technical Summary):
# Pydantic models for Perenual v2 species-list and species-details payloads.
# Lenient parsing: list-or-string fields are normalized, empty nested objects
# become None and unknown fields are ignored.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# perenual_client.py, import_mapper.py, catalog API schemas

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_name_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    return [str(item) for item in value if item]


def _empty_mapping_is_none(value: Any) -> Any:
    # The catalog sends {}, [] or all-null objects when it has no data
    if isinstance(value, dict):
        return value if any(v is not None and v != "" for v in value.values()) else None
    if isinstance(value, (list, str)) or value is None:
        return None
    return value


class WateringBenchmark(BaseModel):
    """Structured watering interval hint, e.g. value "7-10", unit "days"."""

    model_config = ConfigDict(extra="ignore")

    value: Optional[str] = None
    unit: Optional[str] = None

    @field_validator("value", "unit", mode="before")
    @classmethod
    def stringify(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)


class SpeciesImage(BaseModel):
    """Image links of a species; the catalog may leave any of them out."""

    model_config = ConfigDict(extra="ignore")

    thumbnail: Optional[str] = None
    regular_url: Optional[str] = None
    original_url: Optional[str] = None


class HardinessZones(BaseModel):
    """USDA hardiness zone range, e.g. min "4", max "9"."""

    model_config = ConfigDict(extra="ignore")

    min: Optional[str] = None
    max: Optional[str] = None

    @field_validator("min", "max", mode="before")
    @classmethod
    def stringify(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)


class CatalogSpeciesSummary(BaseModel):
    """One species-list search hit."""

    model_config = ConfigDict(extra="ignore")

    id: int
    common_name: Optional[str] = None
    scientific_name: List[str] = Field(default_factory=list)
    other_name: List[str] = Field(default_factory=list)
    cycle: Optional[str] = None
    watering: Optional[str] = None
    sunlight: Union[List[str], str, None] = None
    thumbnail_url: Optional[str] = None

    @field_validator("scientific_name", "other_name", mode="before")
    @classmethod
    def normalize_names(cls, v: Any) -> List[str]:
        return _as_name_list(v)

    @classmethod
    def from_api(cls, payload: dict) -> "CatalogSpeciesSummary":
        image = payload.get("default_image") or {}
        thumbnail = image.get("thumbnail") if isinstance(image, dict) else None
        return cls.model_validate({**payload, "thumbnail_url": thumbnail})


class CatalogSearchPage(BaseModel):
    """One page of species-list results."""

    results: List[CatalogSpeciesSummary]
    page: int = 1
    last_page: int = 1
    per_page: Optional[int] = None
    total: Optional[int] = None

    @property
    def has_next(self) -> bool:
        return self.page < self.last_page


class CatalogSpeciesDetails(BaseModel):
    """Species details as returned by the catalog."""

    model_config = ConfigDict(extra="ignore")

    id: int
    common_name: Optional[str] = None
    scientific_name: List[str] = Field(default_factory=list)
    other_name: List[str] = Field(default_factory=list)
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

    @field_validator("scientific_name", "other_name", mode="before")
    @classmethod
    def normalize_names(cls, v: Any) -> List[str]:
        return _as_name_list(v)

    @field_validator("watering_general_benchmark", "hardiness", "default_image", mode="before")
    @classmethod
    def empty_objects_are_none(cls, v: Any) -> Any:
        return _empty_mapping_is_none(v)

    @field_validator("indoor", mode="before")
    @classmethod
    def lenient_bool(cls, v: Any) -> Any:
        if isinstance(v, (bool, type(None))):
            return v
        if isinstance(v, (int, float)):
            return bool(v)
        return None
