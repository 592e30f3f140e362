# 📄 File: garden_tracker/shared/infrastructure/external_apis/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tools for calling outside web services.
#
# 🧪 Purpose (Technical Summary):
# Exports the aiohttp-based APIClient base.
#
# 🔗 Dependencies:
# - aiohttp
#
# 🔄 Connected Modules / Calls From:
# - plant_catalog.infrastructure.external

from .api_client import APIClient

__all__ = ["APIClient"]
