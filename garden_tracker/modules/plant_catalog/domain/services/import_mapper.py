# 📄 File: garden_tracker/modules/plant_catalog/domain/services/import_mapper.py
# 🧭 Purpose (Layman Explanation):
# Turns an encyclopedia entry into a new plant for the user's garden, guessing
# a sensible watering frequency from the encyclopedia's hints.
# 🧪 Purpose (Technical Summary):
# Pure mapping CatalogSpeciesDetails -> Plant. The plant starts without a last
# watering, so its next watering date stays empty until it is first watered.
# 🔗 Dependencies:
# plant_management.domain (Plant, schedule calculator)
# 🔄 Connected Modules / Calls From:
# ImportSpeciesCommandHandler

from typing import Optional
from uuid import UUID

from garden_tracker.modules.plant_management.domain.models.plant import Plant
from garden_tracker.modules.plant_management.domain.services.watering_schedule import (
    compute_next_watering,
    estimate_frequency_from_hint,
)
from garden_tracker.shared.utils.helpers import clean_optional_text

from ..models.species import CatalogSpeciesDetails

IMPORT_NOTES_PLACEHOLDER = "Imported from the plant catalog. No description available."
UNKNOWN_PLANT_NAME = "Unknown plant"
MAX_NAME_LENGTH = 200


def _display_name(details: CatalogSpeciesDetails) -> str:
    for candidate in [details.common_name, *details.scientific_name]:
        cleaned = clean_optional_text(candidate)
        if cleaned:
            return cleaned[:MAX_NAME_LENGTH]
    return UNKNOWN_PLANT_NAME


def _sunlight_text(details: CatalogSpeciesDetails) -> Optional[str]:
    sunlight = details.sunlight
    if sunlight is None:
        return None
    if isinstance(sunlight, str):
        return clean_optional_text(sunlight)
    parts = [part.strip() for part in sunlight if part and part.strip()]
    return ", ".join(parts) or None


def estimated_frequency_for(details: CatalogSpeciesDetails) -> Optional[int]:
    """Watering frequency an import of this species would get."""
    return estimate_frequency_from_hint(
        details.watering_general_benchmark,
        details.watering,
    )


def map_species_to_plant(details: CatalogSpeciesDetails, owner_id: UUID) -> Plant:
    """
    Build an unsaved Plant from catalog species details.

    - name: common name, else first scientific name, else "Unknown plant"
    - species: the scientific names joined with ", "
    - notes: description, else a placeholder
    - sunlight_needs: the sunlight list joined with ", "
    - watering_frequency_days: estimated from the benchmark, then the label
    """
    frequency = estimated_frequency_for(details)
    species = ", ".join(name.strip() for name in details.scientific_name if name.strip())

    return Plant(
        owner_id=owner_id,
        name=_display_name(details),
        species=clean_optional_text(species),
        notes=clean_optional_text(details.description) or IMPORT_NOTES_PLACEHOLDER,
        sunlight_needs=_sunlight_text(details),
        last_watered_date=None,
        watering_frequency_days=frequency,
        next_watering_date=compute_next_watering(None, frequency),
    )
