"""Create care reminder tables

Revision ID: 001
Revises:
Create Date: 2024-06-01 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

REMINDER_TYPES = "'watering', 'fertilizing', 'pruning', 'rotation', 'repotting', 'other'"
FREQUENCIES = (
    "'daily', 'every3days', 'weekly', 'biweekly', 'monthly', "
    "'quarterly', 'sixmonthly', 'yearly', 'biannually'"
)
WEEKDAYS = "'monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday'"


def upgrade() -> None:
    """Create care reminder tables"""

    # 1. Create care_reminders table
    op.create_table('care_reminders',
        sa.Column('id', sa.String(36), nullable=False, comment='Reminder UUID'),
        sa.Column('plant_id', sa.String(64), nullable=False, comment='External plant reference'),
        sa.Column('plant_name', sa.String(120), nullable=True),
        sa.Column('reminder_type', sa.String(20), nullable=False),
        sa.Column('frequency', sa.String(20), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('preferred_day_of_week', sa.String(10), nullable=True),
        sa.Column('preferred_time', sa.String(10), nullable=True),
        sa.Column('next_due', sa.Date(), nullable=False),
        sa.Column('last_completed', sa.Date(), nullable=True),
        sa.Column('enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('notification_handle', sa.String(36), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_care_reminders')),
        sa.CheckConstraint(f"reminder_type IN ({REMINDER_TYPES})", name=op.f('ck_care_reminders_reminder_type')),
        sa.CheckConstraint(f"frequency IN ({FREQUENCIES})", name=op.f('ck_care_reminders_frequency')),
        sa.CheckConstraint(
            f"preferred_day_of_week IS NULL OR preferred_day_of_week IN ({WEEKDAYS})",
            name=op.f('ck_care_reminders_preferred_day_of_week'),
        ),
    )
    op.create_index(op.f('ix_care_reminders_plant_id'), 'care_reminders', ['plant_id'])
    op.create_index('ix_care_reminders_enabled_next_due', 'care_reminders', ['enabled', 'next_due'])

    # 2. Create scheduled_alerts table
    op.create_table('scheduled_alerts',
        sa.Column('handle', sa.String(36), nullable=False, comment='Opaque alert handle'),
        sa.Column('reminder_id', sa.String(36), nullable=False),
        sa.Column('shape', sa.String(10), nullable=False),
        sa.Column('hour', sa.Integer(), nullable=True),
        sa.Column('minute', sa.Integer(), nullable=True),
        sa.Column('weekday', sa.String(10), nullable=True),
        sa.Column('fire_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('payload', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('cancelled_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('handle', name=op.f('pk_scheduled_alerts')),
        sa.ForeignKeyConstraint(
            ['reminder_id'], ['care_reminders.id'],
            name=op.f('fk_scheduled_alerts_reminder_id_care_reminders'),
            ondelete='CASCADE',
        ),
        sa.CheckConstraint("shape IN ('daily', 'weekly', 'one_shot')", name=op.f('ck_scheduled_alerts_shape')),
    )
    op.create_index(op.f('ix_scheduled_alerts_reminder_id'), 'scheduled_alerts', ['reminder_id'])


def downgrade() -> None:
    """Drop care reminder tables"""
    op.drop_index(op.f('ix_scheduled_alerts_reminder_id'), table_name='scheduled_alerts')
    op.drop_table('scheduled_alerts')
    op.drop_index('ix_care_reminders_enabled_next_due', table_name='care_reminders')
    op.drop_index(op.f('ix_care_reminders_plant_id'), table_name='care_reminders')
    op.drop_table('care_reminders')
