# 📄 File: garden_tracker/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as the home of common tools every part of the
# Garden Tracker uses, like settings, database access and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, infrastructure and cross-cutting
# concerns used by the plant_management and plant_catalog modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management
- Database infrastructure
- Session gate (Supabase Auth)
- Exceptions and structured logging
"""

__all__ = []
