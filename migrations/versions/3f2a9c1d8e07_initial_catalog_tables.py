"""initial catalog tables

Revision ID: 3f2a9c1d8e07
Revises:
Create Date: 2026-10-12 09:15:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f2a9c1d8e07'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('sku', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('type_id', sa.String(length=20), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_products_sku', 'products', ['sku'], unique=True)
    op.create_index('ix_products_status', 'products', ['status'], unique=False)

    op.create_table(
        'attribute_options',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('attribute_code', sa.String(length=50), nullable=False),
        sa.Column('label', sa.String(length=100), nullable=False),
        sa.Column('sort_order', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('attribute_code', 'label', name='uq_attribute_option'),
    )
    op.create_index(
        'ix_attribute_options_attribute_code', 'attribute_options', ['attribute_code'], unique=False
    )

    op.create_table(
        'audit_log',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('admin', sa.String(length=100), nullable=False),
        sa.Column('action', sa.String(length=50), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=True),
        sa.Column('payload', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['product_id'], ['products.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_audit_log_admin', 'audit_log', ['admin'], unique=False)
    op.create_index('ix_audit_log_product_id', 'audit_log', ['product_id'], unique=False)
    op.create_index('ix_audit_log_created_at', 'audit_log', ['created_at'], unique=False)


def downgrade():
    op.drop_index('ix_audit_log_created_at', table_name='audit_log')
    op.drop_index('ix_audit_log_product_id', table_name='audit_log')
    op.drop_index('ix_audit_log_admin', table_name='audit_log')
    op.drop_table('audit_log')
    op.drop_index('ix_attribute_options_attribute_code', table_name='attribute_options')
    op.drop_table('attribute_options')
    op.drop_index('ix_products_status', table_name='products')
    op.drop_index('ix_products_sku', table_name='products')
    op.drop_table('products')
