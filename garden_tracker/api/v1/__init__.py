# 📄 File: garden_tracker/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the garden tracker's web API.
# 🧪 Purpose (Technical Summary):
# API v1 package: route prefixes and tags shared by the v1 router.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# garden_tracker.api.v1.router, garden_tracker.main

API_VERSION = "v1"
API_PREFIX = "/api/v1"

ROUTE_PREFIXES = {
    "plants": "/plants",
    "catalog": "/catalog",
    "diagnostics": "/diagnostics",
}

API_TAGS = {
    "plants": "Plants",
    "catalog": "Plant Catalog",
    "diagnostics": "Diagnostics",
    "health": "Health Check",
}
