# 📄 File: garden_tracker/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this folder holds the Garden Tracker application and records
# its version and basic package information.
#
# 🧪 Purpose (Technical Summary):
# Package initialization with version metadata for the Garden Tracker
# FastAPI service.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - garden_tracker.main (application entry point)
# - pyproject.toml version metadata

"""
Garden Tracker - personal plant collection and watering schedule service.

A backend API for keeping a list of plants, working out when each one
needs water next, and importing plants from an external species catalog.
"""

__version__ = "1.0.0"
__title__ = "Garden Tracker API"
__description__ = "Personal plant collection and watering schedule tracker"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
