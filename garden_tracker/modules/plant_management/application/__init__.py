# 📄 File: garden_tracker/modules/plant_management/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The use cases of the garden: add, edit, water, list and remove plants.
# 🧪 Purpose (Technical Summary):
# Application layer (CQRS commands, queries and their handlers) coordinating
# domain services and the plant repository.
# 🔗 Dependencies:
# pydantic, plant_management.domain
# 🔄 Connected Modules / Calls From:
# plant_management.presentation, plant_catalog.application
