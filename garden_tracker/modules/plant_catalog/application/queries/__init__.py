from .catalog_queries import GetSpeciesDetailsQuery, SearchSpeciesQuery

__all__ = ["GetSpeciesDetailsQuery", "SearchSpeciesQuery"]
