# 📄 File: garden_tracker/modules/plant_management/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# Describes a plant in the user's garden: its name, notes, light needs, when it
# was last watered, how often it needs water and when it is due next.
# 🧪 Purpose (Technical Summary):
# Plant domain entity (pydantic) with field validation and UTC normalization.
# next_watering_date is derived data and only ever set through the watering
# schedule calculator by handlers and domain services.
# 🔗 Dependencies:
# pydantic, datetime, uuid, garden_tracker.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# watering_service.py, plant_repository.py, command/query handlers,
# plant_catalog import mapper, API schemas

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from garden_tracker.shared.utils.helpers import clean_optional_text, ensure_utc


class Plant(BaseModel):
    """
    Plant domain model, the only persisted entity of the garden.

    Fields:
    - id (UUID): assigned by the store on creation, immutable afterwards
    - owner_id (UUID): the Supabase Auth user who owns the plant
    - name (str): required, never blank
    - species, notes, sunlight_needs (str): optional free text
    - date_planted (datetime): optional
    - last_watered_date (datetime): set by every watering action
    - watering_frequency_days (int): optional, strictly positive
    - next_watering_date (datetime): last_watered_date + frequency, or None
    - created_at / updated_at (datetime): maintained by the store

    All datetimes are held as aware UTC values.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        from_attributes=True,
    )

    id: Optional[UUID] = None
    owner_id: UUID

    name: str = Field(..., min_length=1, max_length=200)
    species: Optional[str] = None
    notes: Optional[str] = None
    sunlight_needs: Optional[str] = None

    date_planted: Optional[datetime] = None
    last_watered_date: Optional[datetime] = None
    watering_frequency_days: Optional[int] = Field(None, gt=0)
    next_watering_date: Optional[datetime] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> Any:
        """Plant name is required and must contain something besides whitespace"""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("Plant name is required")
        return v

    @field_validator("species", "notes", "sunlight_needs")
    @classmethod
    def clean_text(cls, v: Optional[str]) -> Optional[str]:
        return clean_optional_text(v)

    @field_validator(
        "date_planted",
        "last_watered_date",
        "next_watering_date",
        "created_at",
        "updated_at",
    )
    @classmethod
    def normalize_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)

    @field_validator("watering_frequency_days", mode="before")
    @classmethod
    def reject_boolean_frequency(cls, v: Any) -> Any:
        # bool is an int subclass; True would otherwise become 1 day
        if isinstance(v, bool):
            raise ValueError("Watering frequency must be a whole number of days")
        return v

    def to_record(self) -> Dict[str, Any]:
        """Field mapping handed to the store on insert."""
        return self.model_dump(exclude={"id", "created_at", "updated_at"})
