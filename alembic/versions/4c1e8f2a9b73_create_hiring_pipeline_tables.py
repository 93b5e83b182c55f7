"""create_hiring_pipeline_tables

Creates the users, departments, job_vacancies, applicants, applications,
status_history and evaluations tables.

- status_history and evaluations cascade-delete with their application
- evaluations.application_id is unique (one evaluation per application)

Revision ID: 4c1e8f2a9b73
Revises:
Create Date: 2026-02-14 09:30:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '4c1e8f2a9b73'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

APPLICATION_STATUSES = (
    'Application Received',
    'Under Initial Screening',
    'For Examination',
    'For Interview',
    'For Final Evaluation',
    'Approved',
    'Hired',
    'Rejected',
)

user_role = postgresql.ENUM('admin', 'staff', name='userrole', create_type=False)
vacancy_status = postgresql.ENUM('Open', 'Closed', 'Filled', name='vacancystatus', create_type=False)
application_status = postgresql.ENUM(*APPLICATION_STATUSES, name='applicationstatus', create_type=False)


def upgrade() -> None:
    """Create the hiring pipeline schema."""
    bind = op.get_bind()
    # applicationstatus is shared by two tables, so types are created once up front
    for enum_type in (user_role, vacancy_status, application_status):
        enum_type.create(bind, checkfirst=True)

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('role', user_role, nullable=False, server_default='staff'),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'departments',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
    )
    op.create_index('ix_departments_id', 'departments', ['id'])

    op.create_table(
        'job_vacancies',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('position_title', sa.String(), nullable=False),
        sa.Column('department_id', sa.Integer(), sa.ForeignKey('departments.id'), nullable=False),
        sa.Column('salary_grade', sa.Integer(), nullable=False),
        sa.Column('qualifications', sa.Text(), nullable=False),
        sa.Column('posting_date', sa.Date(), nullable=False),
        sa.Column('closing_date', sa.Date(), nullable=False),
        sa.Column('status', vacancy_status, nullable=False, server_default='Open'),
    )
    op.create_index('ix_job_vacancies_id', 'job_vacancies', ['id'])
    op.create_index('ix_job_vacancies_position_title', 'job_vacancies', ['position_title'])
    op.create_index('ix_job_vacancies_department_id', 'job_vacancies', ['department_id'])
    op.create_index('ix_job_vacancies_status', 'job_vacancies', ['status'])

    op.create_table(
        'applicants',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column('contact_number', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('address', sa.String(), nullable=False),
        sa.Column('educational_background', sa.Text(), nullable=False),
        sa.Column('work_experience', sa.Text(), nullable=False),
    )
    op.create_index('ix_applicants_id', 'applicants', ['id'])
    op.create_index('ix_applicants_full_name', 'applicants', ['full_name'])

    op.create_table(
        'applications',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('applicant_id', sa.Integer(), nullable=False),
        sa.Column('vacancy_id', sa.Integer(), nullable=False),
        sa.Column('status', application_status, nullable=False, server_default='Application Received'),
        sa.Column('date_applied', sa.Date(), nullable=False),
        sa.Column('remarks', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['applicant_id'], ['applicants.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['vacancy_id'], ['job_vacancies.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_applications_id', 'applications', ['id'])
    op.create_index('ix_applications_applicant_id', 'applications', ['applicant_id'])
    op.create_index('ix_applications_vacancy_id', 'applications', ['vacancy_id'])
    op.create_index('ix_applications_status', 'applications', ['status'])

    op.create_table(
        'status_history',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('application_id', sa.Integer(), nullable=False),
        sa.Column('status', application_status, nullable=False),
        sa.Column('remarks', sa.Text(), nullable=False, server_default=''),
        sa.Column('updated_by', sa.String(), nullable=False, server_default='System'),
        sa.Column('updated_at', sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(['application_id'], ['applications.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_status_history_id', 'status_history', ['id'])
    op.create_index('ix_status_history_application_id', 'status_history', ['application_id'])
    op.create_index('ix_status_history_updated_at', 'status_history', ['updated_at'])

    op.create_table(
        'evaluations',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('application_id', sa.Integer(), nullable=False),
        sa.Column('exam_score', sa.Float(), nullable=False),
        sa.Column('interview_score', sa.Float(), nullable=False),
        sa.Column('total_score', sa.Float(), nullable=False),
        sa.Column('remarks', sa.Text(), nullable=False, server_default=''),
        sa.Column('evaluated_by', sa.String(), nullable=False),
        sa.Column('evaluated_at', sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(['application_id'], ['applications.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_evaluations_id', 'evaluations', ['id'])
    op.create_index('ix_evaluations_application_id', 'evaluations', ['application_id'], unique=True)
    op.create_index('ix_evaluations_total_score', 'evaluations', ['total_score'])


def downgrade() -> None:
    """Drop the hiring pipeline schema."""
    op.drop_table('evaluations')
    op.drop_table('status_history')
    op.drop_table('applications')
    op.drop_table('applicants')
    op.drop_table('job_vacancies')
    op.drop_table('departments')
    op.drop_table('users')

    bind = op.get_bind()
    for enum_type in (application_status, vacancy_status, user_role):
        enum_type.drop(bind, checkfirst=True)
