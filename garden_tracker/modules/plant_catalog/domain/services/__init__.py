from .import_mapper import IMPORT_NOTES_PLACEHOLDER, estimated_frequency_for, map_species_to_plant

__all__ = ["IMPORT_NOTES_PLACEHOLDER", "estimated_frequency_for", "map_species_to_plant"]
