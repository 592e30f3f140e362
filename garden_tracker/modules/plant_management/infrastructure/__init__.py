# 📄 File: garden_tracker/modules/plant_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where plants are actually saved: the PostgreSQL table and the code that reads
# and writes it.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer for plant management (SQLAlchemy model and repository).
# 🔗 Dependencies:
# SQLAlchemy async, asyncpg
# 🔄 Connected Modules / Calls From:
# plant_management.presentation.dependencies, migrations/env.py
