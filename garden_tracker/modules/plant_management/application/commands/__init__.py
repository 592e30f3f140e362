from .create_plant import CreatePlantCommand
from .delete_plant import DeletePlantCommand
from .update_plant import UpdatePlantCommand
from .water_plants import WaterOverduePlantsCommand, WaterPlantCommand

__all__ = [
    "CreatePlantCommand",
    "DeletePlantCommand",
    "UpdatePlantCommand",
    "WaterOverduePlantsCommand",
    "WaterPlantCommand",
]
