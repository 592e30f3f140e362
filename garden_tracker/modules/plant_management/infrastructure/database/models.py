# 📄 File: garden_tracker/modules/plant_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how a plant is laid out in the database table.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the ``plants`` table: UUID primary key generated on
# insert, owner index, check constraints for a non-blank name and a positive
# frequency, and store-maintained timestamps.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - garden_tracker.shared.config.database (DatabaseBase)
#
# 🔄 Connected Modules / Calls From:
# - plant_repository_impl.py (CRUD operations)
# - migrations/versions/001_create_plants_table.py

"""
SQLAlchemy Models for Plant Management

Models:
- PlantModel: one row per plant in a user's garden
"""

from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import UUID as PG_UUID

from garden_tracker.shared.config.database import DatabaseBase


class PlantModel(DatabaseBase):
    """
    SQLAlchemy model for a plant record.

    ``owner_id`` is the Supabase Auth user id (auth.users.id). It is not a
    foreign key here because the auth schema belongs to Supabase.
    """
    __tablename__ = "plants"
    __table_args__ = (
        CheckConstraint("length(trim(name)) > 0", name="name_not_blank"),
        CheckConstraint(
            "watering_frequency_days IS NULL OR watering_frequency_days > 0",
            name="watering_frequency_positive",
        ),
    )

    id = Column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
        nullable=False,
        comment="Unique identifier for each plant"
    )
    owner_id = Column(
        PG_UUID(as_uuid=True),
        nullable=False,
        index=True,
        comment="Supabase Auth user owning the plant"
    )

    name = Column(String(200), nullable=False, comment="Plant name")
    species = Column(Text, nullable=True, comment="Scientific or common species name")
    notes = Column(Text, nullable=True, comment="Free-form care notes")
    sunlight_needs = Column(Text, nullable=True, comment="Light requirements")

    date_planted = Column(DateTime(timezone=True), nullable=True)
    last_watered_date = Column(DateTime(timezone=True), nullable=True)
    watering_frequency_days = Column(Integer, nullable=True, comment="Days between waterings")
    next_watering_date = Column(
        DateTime(timezone=True),
        nullable=True,
        comment="last_watered_date + watering_frequency_days, derived on every write"
    )

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<PlantModel(id={self.id}, name='{self.name}', owner_id={self.owner_id})>"
