# 📄 File: garden_tracker/shared/infrastructure/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the plumbing that talks to the outside world: the database and
# external web APIs.
#
# 🧪 Purpose (Technical Summary):
# Shared infrastructure package (async database engine and sessions,
# aiohttp API client base).
#
# 🔗 Dependencies:
# - SQLAlchemy, aiohttp
#
# 🔄 Connected Modules / Calls From:
# - Module repository implementations and external clients
