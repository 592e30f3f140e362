# 📄 File: garden_tracker/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Groups the settings that tell the Garden Tracker where its database,
# login service and plant catalog live.
#
# 🧪 Purpose (Technical Summary):
# Configuration package exposing the cached Settings factory and the
# Supabase client manager.
#
# 🔗 Dependencies:
# - pydantic-settings
#
# 🔄 Connected Modules / Calls From:
# - garden_tracker.main
# - Database, auth and catalog infrastructure

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
