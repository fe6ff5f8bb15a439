"""Create products, product_categories and product_variants tables.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create catalog tables."""
    # Products table
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('code', sa.String(32), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
    )
    op.create_unique_constraint('uq_products_code', 'products', ['code'])

    # Categories table (category belongs to a product)
    op.create_table(
        'product_categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('product_id', sa.Integer(),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('code', sa.String(36), nullable=False),
        sa.Column('name', sa.String(256), nullable=False, index=True),
    )
    op.create_unique_constraint('uq_product_categories_code', 'product_categories', ['code'])

    # Product variants table; price 0 means "inherit product price"
    op.create_table(
        'product_variants',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('product_id', sa.Integer(),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('name', sa.String(256), nullable=False),
        sa.Column('sku', sa.String(256), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False, server_default='0'),
    )


def downgrade() -> None:
    """Drop catalog tables."""
    op.drop_table('product_variants')
    op.drop_table('product_categories')
    op.drop_table('products')
