"""create_companies_and_jobs

Revision ID: 3f2a9c1d7b40
Revises:
Create Date: 2026-10-18 10:12:31.402117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('companies',
    sa.Column('handle', sa.String(length=25), nullable=False),
    sa.Column('name', sa.Text(), nullable=False),
    sa.Column('num_employees', sa.Integer(), nullable=True),
    sa.Column('description', sa.Text(), nullable=False),
    sa.Column('logo_url', sa.Text(), nullable=True),
    sa.CheckConstraint('num_employees >= 0', name='ck_companies_num_employees_non_negative'),
    sa.PrimaryKeyConstraint('handle'),
    sa.UniqueConstraint('name')
    )

    op.create_table('jobs',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('title', sa.Text(), nullable=False),
    sa.Column('salary', sa.Integer(), nullable=True),
    sa.Column('equity', sa.Numeric(), nullable=True),
    sa.Column('company_handle', sa.String(length=25), nullable=False),
    sa.CheckConstraint('salary >= 0', name='ck_jobs_salary_non_negative'),
    sa.CheckConstraint('equity <= 1.0', name='ck_jobs_equity_max_one'),
    sa.ForeignKeyConstraint(['company_handle'], ['companies.handle'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_jobs_id'), 'jobs', ['id'], unique=False)
    op.create_index(op.f('ix_jobs_company_handle'), 'jobs', ['company_handle'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_jobs_company_handle'), table_name='jobs')
    op.drop_index(op.f('ix_jobs_id'), table_name='jobs')
    op.drop_table('jobs')
    op.drop_table('companies')
