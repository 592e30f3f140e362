# 📄 File: garden_tracker/modules/plant_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about the user's own plants: adding, editing and removing them,
# and keeping track of when each one needs water.
# 🧪 Purpose (Technical Summary):
# Plant management bounded context: Plant entity, watering schedule domain
# services, command/query handlers, SQLAlchemy repository and REST endpoints.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, garden_tracker.shared
# 🔄 Connected Modules / Calls From:
# garden_tracker.api.v1.router, plant_catalog (import creates plants)

"""
Plant Management Module

- Plant records (create, read, edit, delete with confirmation)
- Watering schedule: next watering date, overdue detection
- Water one plant, water every overdue plant

Architecture follows Domain-Driven Design:
- Domain: Plant entity, schedule calculator, repository interface
- Application: Commands, queries and handlers
- Infrastructure: SQLAlchemy model and repository
- Presentation: API endpoints and request/response schemas
"""
