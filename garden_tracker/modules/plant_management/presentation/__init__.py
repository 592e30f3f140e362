# 📄 File: garden_tracker/modules/plant_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web doors into the garden: the URLs the app's pages call.
# 🧪 Purpose (Technical Summary):
# Presentation layer (FastAPI routers, request/response schemas, dependency wiring).
# 🔗 Dependencies:
# FastAPI, pydantic
# 🔄 Connected Modules / Calls From:
# garden_tracker.api.v1.router
