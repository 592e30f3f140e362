# 📄 File: garden_tracker/modules/plant_catalog/application/queries/catalog_queries.py
# 🧭 Purpose (Layman Explanation):
# Questions asked of the plant encyclopedia: "which species match this name?"
# and "tell me everything about this species".
# 🧪 Purpose (Technical Summary):
# CQRS queries for catalog search and species details. Read-only; they never
# touch the plant store.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# catalog query handlers, catalog API

from pydantic import BaseModel, Field


class SearchSpeciesQuery(BaseModel):
    query: str = Field(..., min_length=1, max_length=100)
    page: int = Field(1, ge=1)


class GetSpeciesDetailsQuery(BaseModel):
    species_id: int = Field(..., gt=0)
