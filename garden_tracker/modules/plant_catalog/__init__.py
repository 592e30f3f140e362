# 📄 File: garden_tracker/modules/plant_catalog/__init__.py
# 🧭 Purpose (Layman Explanation):
# Looking plants up in an online plant encyclopedia (Perenual) and adding a
# found species to the garden with a suggested watering schedule.
# 🧪 Purpose (Technical Summary):
# Plant catalog bounded context: Perenual v2 client, catalog domain models,
# catalog-to-Plant import mapping and the import use case.
# 🔗 Dependencies:
# aiohttp, pydantic, plant_management (Plant, repository, schedule estimator)
# 🔄 Connected Modules / Calls From:
# garden_tracker.api.v1.router

"""
Plant Catalog Module

- Species search with paging
- Species details
- Import a species as a new plant (estimated watering frequency)

The catalog is treated as an unreliable network dependency: every failure
is reported to the caller as retryable and aborts the operation before
anything is written.
"""
