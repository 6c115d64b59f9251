"""create phrases table

Revision ID: 20261019_1010_create_phrases
Revises: 20261019_1000_create_categories
Create Date: 2026-10-19 10:10:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261019_1010_create_phrases'
down_revision = '20261019_1000_create_categories'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'phrases',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column(
            'category_id',
            sa.Integer(),
            sa.ForeignKey('categories.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('pinned', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index('ix_phrases_category_id', 'phrases', ['category_id'])

def downgrade() -> None:
    op.drop_index('ix_phrases_category_id', table_name='phrases')
    op.drop_table('phrases')
