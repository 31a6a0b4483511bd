"""Initial schema: master data, assignments and SK documents

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _record_columns():
    return [
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'schools',
        *_record_columns(),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('npsn', sa.String(length=20), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('principal_name', sa.Text(), nullable=False),
        sa.Column('principal_nip', sa.String(length=30), nullable=False),
        sa.Column('logo_url', sa.Text(), nullable=True),
        sa.Column('letterhead_url', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_schools_id', 'schools', ['id'])
    op.create_index('ix_schools_npsn', 'schools', ['npsn'])

    op.create_table(
        'teachers',
        *_record_columns(),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('nip_nuptk', sa.String(length=30), nullable=False),
        sa.Column('tmt', sa.DateTime(), nullable=False),
        sa.Column('education', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_teachers_id', 'teachers', ['id'])
    op.create_index('ix_teachers_nip_nuptk', 'teachers', ['nip_nuptk'])

    op.create_table(
        'academic_years',
        *_record_columns(),
        sa.Column('year', sa.String(length=9), nullable=False),
        sa.Column('semester', sa.Integer(), nullable=False),
        sa.Column('curriculum', sa.Text(), nullable=False),
        sa.Column('total_time_allocation', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.CheckConstraint('semester IN (1, 2)', name='ck_academic_year_semester'),
        sa.CheckConstraint('total_time_allocation > 0', name='ck_academic_year_allocation_positive'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_academic_years_id', 'academic_years', ['id'])
    op.create_index('ix_academic_years_is_active', 'academic_years', ['is_active'])

    op.create_table(
        'subjects',
        *_record_columns(),
        sa.Column('code', sa.String(length=20), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('time_allocation', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_subjects_id', 'subjects', ['id'])
    op.create_index('ix_subjects_code', 'subjects', ['code'])

    op.create_table(
        'additional_tasks',
        *_record_columns(),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('jp_equivalent', sa.Numeric(precision=4, scale=2), nullable=False),
        sa.CheckConstraint('jp_equivalent > 0', name='ck_task_jp_positive'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_additional_tasks_id', 'additional_tasks', ['id'])

    op.create_table(
        'classes',
        *_record_columns(),
        sa.Column('academic_year_id', sa.Integer(), nullable=False),
        sa.Column('grade_level', sa.Integer(), nullable=False),
        sa.Column('rombel', sa.String(length=10), nullable=False),
        sa.Column('class_name', sa.String(length=50), nullable=False),
        sa.CheckConstraint('grade_level BETWEEN 7 AND 9', name='ck_class_grade_level'),
        sa.ForeignKeyConstraint(['academic_year_id'], ['academic_years.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_classes_id', 'classes', ['id'])
    op.create_index('ix_classes_academic_year_id', 'classes', ['academic_year_id'])
    op.create_index('ix_classes_class_name', 'classes', ['class_name'])

    op.create_table(
        'jtm_assignments',
        *_record_columns(),
        sa.Column('academic_year_id', sa.Integer(), nullable=False),
        sa.Column('teacher_id', sa.Integer(), nullable=False),
        sa.Column('subject_id', sa.Integer(), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('allocated_hours', sa.Integer(), nullable=False),
        sa.CheckConstraint('allocated_hours > 0', name='ck_jtm_hours_positive'),
        sa.ForeignKeyConstraint(['academic_year_id'], ['academic_years.id']),
        sa.ForeignKeyConstraint(['teacher_id'], ['teachers.id']),
        sa.ForeignKeyConstraint(['subject_id'], ['subjects.id']),
        sa.ForeignKeyConstraint(['class_id'], ['classes.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_jtm_assignments_id', 'jtm_assignments', ['id'])
    for column in ('academic_year_id', 'teacher_id', 'subject_id', 'class_id'):
        op.create_index(f'ix_jtm_assignments_{column}', 'jtm_assignments', [column])

    op.create_table(
        'task_assignments',
        *_record_columns(),
        sa.Column('academic_year_id', sa.Integer(), nullable=False),
        sa.Column('teacher_id', sa.Integer(), nullable=False),
        sa.Column('task_id', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['academic_year_id'], ['academic_years.id']),
        sa.ForeignKeyConstraint(['teacher_id'], ['teachers.id']),
        sa.ForeignKeyConstraint(['task_id'], ['additional_tasks.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_task_assignments_id', 'task_assignments', ['id'])
    for column in ('academic_year_id', 'teacher_id', 'task_id'):
        op.create_index(f'ix_task_assignments_{column}', 'task_assignments', [column])

    op.create_table(
        'sk_document_templates',
        *_record_columns(),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('template_content', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_sk_document_templates_id', 'sk_document_templates', ['id'])

    op.create_table(
        'sk_documents',
        *_record_columns(),
        sa.Column('template_id', sa.Integer(), nullable=False),
        sa.Column('academic_year_id', sa.Integer(), nullable=False),
        sa.Column('document_number', sa.String(length=100), nullable=False),
        sa.Column('creation_date', sa.DateTime(), nullable=False),
        sa.Column('generated_content', sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(['template_id'], ['sk_document_templates.id']),
        sa.ForeignKeyConstraint(['academic_year_id'], ['academic_years.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_sk_documents_id', 'sk_documents', ['id'])
    op.create_index('ix_sk_documents_template_id', 'sk_documents', ['template_id'])
    op.create_index('ix_sk_documents_academic_year_id', 'sk_documents', ['academic_year_id'])


def downgrade() -> None:
    for table in (
        'sk_documents', 'sk_document_templates', 'task_assignments', 'jtm_assignments',
        'classes', 'additional_tasks', 'subjects', 'academic_years', 'teachers', 'schools',
    ):
        op.drop_table(table)
