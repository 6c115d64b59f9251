"""create categories table

Revision ID: 20261019_1000_create_categories
Revises:
Create Date: 2026-10-19 10:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261019_1000_create_categories'
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('label', sa.String(255), nullable=False),
        sa.Column('icon', sa.Text(), nullable=False),
    )
    op.create_index('categories_label_unique', 'categories', ['label'], unique=True)

def downgrade() -> None:
    op.drop_index('categories_label_unique', table_name='categories')
    op.drop_table('categories')
