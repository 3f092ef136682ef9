"""add video_link column for per-option video links

Revision ID: b7c1d2e3f4a5
Revises: 3f2a9c1d8e07
Create Date: 2026-10-14 16:40:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'b7c1d2e3f4a5'
down_revision = '3f2a9c1d8e07'
branch_labels = None
depends_on = None


def upgrade():
    op.add_column('products', sa.Column('video_link', sa.Text(), nullable=True))


def downgrade():
    op.drop_column('products', 'video_link')
