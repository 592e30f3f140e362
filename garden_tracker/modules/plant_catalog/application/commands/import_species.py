# 📄 File: garden_tracker/modules/plant_catalog/application/commands/import_species.py
# 🧭 Purpose (Layman Explanation):
# A request to add a species found in the encyclopedia to the user's garden.
# 🧪 Purpose (Technical Summary):
# CQRS command for catalog import.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# ImportSpeciesCommandHandler, catalog API (POST /catalog/species/{id}/import)

from uuid import UUID

from pydantic import BaseModel, Field


class ImportSpeciesCommand(BaseModel):
    species_id: int = Field(..., gt=0)
    owner_id: UUID
