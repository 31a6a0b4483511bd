"""Add schedule templates, time slots and schedules

Revision ID: 0002_schedule_tables
Revises: 0001_initial_schema
Create Date: 2026-10-17 14:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0002_schedule_tables'
down_revision: Union[str, None] = '0001_initial_schema'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SLOT_TYPES = (
    'belajar', 'sholat_dhuha', 'istirahat', 'shalat_dzuhur_berjamaah',
    'halaqoh_quran', 'program_pembiasaan', 'upacara',
)


def _record_columns():
    return [
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'schedule_templates',
        *_record_columns(),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_schedule_templates_id', 'schedule_templates', ['id'])

    op.create_table(
        'time_slots',
        *_record_columns(),
        sa.Column('template_id', sa.Integer(), nullable=False),
        sa.Column('day_of_week', sa.Integer(), nullable=False),
        sa.Column('jp_number', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.String(length=5), nullable=False),
        sa.Column('end_time', sa.String(length=5), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('slot_type', sa.Enum(*SLOT_TYPES, name='slot_type'), nullable=False),
        sa.CheckConstraint('day_of_week BETWEEN 1 AND 5', name='ck_time_slot_day'),
        sa.CheckConstraint('jp_number > 0', name='ck_time_slot_jp_positive'),
        sa.CheckConstraint('duration > 0', name='ck_time_slot_duration_positive'),
        sa.ForeignKeyConstraint(['template_id'], ['schedule_templates.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_time_slots_id', 'time_slots', ['id'])
    op.create_index('ix_time_slots_template_id', 'time_slots', ['template_id'])

    op.create_table(
        'schedules',
        *_record_columns(),
        sa.Column('academic_year_id', sa.Integer(), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('template_id', sa.Integer(), nullable=False),
        sa.Column('subject_id', sa.Integer(), nullable=True),
        sa.Column('teacher_id', sa.Integer(), nullable=True),
        sa.Column('day_of_week', sa.Integer(), nullable=False),
        sa.Column('jp_number', sa.Integer(), nullable=False),
        sa.Column('is_manual', sa.Boolean(), nullable=False),
        sa.Column('is_cached', sa.Boolean(), nullable=False),
        sa.CheckConstraint('day_of_week BETWEEN 1 AND 5', name='ck_schedule_day'),
        sa.CheckConstraint('jp_number > 0', name='ck_schedule_jp_positive'),
        sa.ForeignKeyConstraint(['academic_year_id'], ['academic_years.id']),
        sa.ForeignKeyConstraint(['class_id'], ['classes.id']),
        sa.ForeignKeyConstraint(['template_id'], ['schedule_templates.id']),
        sa.ForeignKeyConstraint(['subject_id'], ['subjects.id']),
        sa.ForeignKeyConstraint(['teacher_id'], ['teachers.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_schedules_id', 'schedules', ['id'])
    for column in ('academic_year_id', 'class_id', 'template_id', 'subject_id', 'teacher_id'):
        op.create_index(f'ix_schedules_{column}', 'schedules', [column])


def downgrade() -> None:
    op.drop_table('schedules')
    op.drop_table('time_slots')
    op.drop_table('schedule_templates')
    sa.Enum(name='slot_type').drop(op.get_bind(), checkfirst=True)
