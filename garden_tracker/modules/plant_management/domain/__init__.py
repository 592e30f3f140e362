# 📄 File: garden_tracker/modules/plant_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules of the garden: what a plant is and how watering dates are worked out.
# 🧪 Purpose (Technical Summary):
# Domain layer package (models, services, repository interfaces), free of
# web and database concerns.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# plant_management.application, plant_catalog.domain
