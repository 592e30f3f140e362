# 📄 File: garden_tracker/shared/infrastructure/database/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Database connection and per-request session tools.
#
# 🧪 Purpose (Technical Summary):
# Exports the connection manager lifecycle hooks and the FastAPI session
# dependency.
#
# 🔗 Dependencies:
# - SQLAlchemy async
#
# 🔄 Connected Modules / Calls From:
# - garden_tracker.main, repositories, health endpoints

from .connection import close_database, db_manager, initialize_database
from .session import get_db_session, session_manager

__all__ = [
    "close_database",
    "db_manager",
    "get_db_session",
    "initialize_database",
    "session_manager",
]
