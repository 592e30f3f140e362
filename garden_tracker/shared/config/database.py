# 📄 File: garden_tracker/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# The common starting point for every database table in the Garden Tracker,
# including how constraints and indexes get their names.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy declarative base with a constraint naming convention shared by
# the ORM models and Alembic autogeneration.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
#
# 🔄 Connected Modules / Calls From:
# - plant_management.infrastructure.database.models
# - migrations/env.py (target metadata)

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Shares one metadata object so Alembic sees every table.
    """
    metadata = metadata
