from .import_species import ImportSpeciesCommand

__all__ = ["ImportSpeciesCommand"]
