from .get_plant import GetPlantQuery
from .list_plants import ListPlantsQuery

__all__ = ["GetPlantQuery", "ListPlantsQuery"]
