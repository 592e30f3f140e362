# 📄 File: garden_tracker/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The front door of the garden tracker's web API.
# 🧪 Purpose (Technical Summary):
# API package: versioned routers and HTTP middleware.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# garden_tracker.main
