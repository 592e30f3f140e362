from uuid import uuid4

from garden_tracker.modules.plant_catalog.domain.models.species import CatalogSpeciesDetails
from garden_tracker.modules.plant_catalog.domain.services.import_mapper import (
    IMPORT_NOTES_PLACEHOLDER,
    map_species_to_plant,
)
from garden_tracker.modules.plant_management.domain.services.watering_service import is_overdue

from .conftest import BASIL, CACTUS, NOW, OWNER_ID


def details(**payload) -> CatalogSpeciesDetails:
    return CatalogSpeciesDetails.model_validate({"id": 1, **payload})


def test_maps_full_species():
    plant = map_species_to_plant(CatalogSpeciesDetails.model_validate(BASIL), OWNER_ID)

    assert plant.id is None
    assert plant.owner_id == OWNER_ID
    assert plant.name == "Sweet basil"
    assert plant.species == "Ocimum basilicum"
    assert plant.notes == "A fragrant culinary herb."
    assert plant.sunlight_needs == "full sun, part shade"
    assert plant.watering_frequency_days == 5


def test_imported_plant_is_never_overdue():
    plant = map_species_to_plant(CatalogSpeciesDetails.model_validate(BASIL), OWNER_ID)

    assert plant.last_watered_date is None
    assert plant.date_planted is None
    assert plant.next_watering_date is None
    assert not is_overdue(plant, NOW)


def test_sparse_species_uses_placeholder_and_label():
    plant = map_species_to_plant(CatalogSpeciesDetails.model_validate(CACTUS), uuid4())

    assert plant.notes == IMPORT_NOTES_PLACEHOLDER
    assert plant.sunlight_needs == "full sun"
    assert plant.watering_frequency_days == 14


def test_name_falls_back_to_scientific_then_unknown():
    assert map_species_to_plant(
        details(common_name="  ", scientific_name=["Ficus lyrata", "Ficus pandurata"]), OWNER_ID
    ).name == "Ficus lyrata"
    assert map_species_to_plant(details(), OWNER_ID).name == "Unknown plant"


def test_multiple_scientific_names_are_joined():
    plant = map_species_to_plant(
        details(common_name="Fiddle-leaf fig", scientific_name=["Ficus lyrata", "Ficus pandurata"]),
        OWNER_ID,
    )
    assert plant.species == "Ficus lyrata, Ficus pandurata"


def test_scientific_name_given_as_string():
    plant = map_species_to_plant(details(scientific_name="Aloe vera"), OWNER_ID)
    assert plant.name == "Aloe vera"
    assert plant.species == "Aloe vera"


def test_no_watering_hints_leaves_frequency_unset():
    plant = map_species_to_plant(details(common_name="Mystery", watering="None"), OWNER_ID)
    assert plant.watering_frequency_days is None
    assert plant.next_watering_date is None


def test_weekly_benchmark_is_scaled():
    plant = map_species_to_plant(
        details(common_name="Snake plant", watering_general_benchmark={"value": "2-3", "unit": "weeks"}),
        OWNER_ID,
    )
    assert plant.watering_frequency_days == 14


def test_numeric_benchmark_value_is_accepted():
    plant = map_species_to_plant(
        details(common_name="Pothos", watering_general_benchmark={"value": 6, "unit": "days"}),
        OWNER_ID,
    )
    assert plant.watering_frequency_days == 6
