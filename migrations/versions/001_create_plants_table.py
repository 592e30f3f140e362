"""Create plants table

Revision ID: 001
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the plants table"""

    op.create_table('plants',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('owner_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('species', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('sunlight_needs', sa.Text(), nullable=True),
        sa.Column('date_planted', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_watered_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('watering_frequency_days', sa.Integer(), nullable=True),
        sa.Column('next_watering_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_plants'),
        sa.CheckConstraint('length(trim(name)) > 0', name='ck_plants_name_not_blank'),
        sa.CheckConstraint(
            'watering_frequency_days IS NULL OR watering_frequency_days > 0',
            name='ck_plants_watering_frequency_positive',
        ),
    )

    op.create_index('ix_plants_owner_id', 'plants', ['owner_id'])


def downgrade() -> None:
    """Drop the plants table"""
    op.drop_index('ix_plants_owner_id', table_name='plants')
    op.drop_table('plants')
