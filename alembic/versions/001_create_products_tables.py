"""Create products and product_images tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create products and product_images tables."""
    # Products table
    op.create_table(
        'products',
        sa.Column('id', postgresql.UUID(as_uuid=False), primary_key=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False, server_default='0'),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('slug', sa.Text(), nullable=False),
        sa.Column('stock', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('sizes', postgresql.JSONB(), nullable=False, server_default='[]'),
        sa.Column('gender', sa.String(10), nullable=False, server_default='unisex'),
        sa.Column('tags', postgresql.JSONB(), nullable=False, server_default='[]'),
    )

    op.create_unique_constraint('uq_products_title', 'products', ['title'])
    op.create_unique_constraint('uq_products_slug', 'products', ['slug'])

    # Product images table
    op.create_table(
        'product_images',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('url', sa.Text(), nullable=False),
        sa.Column('product_id', postgresql.UUID(as_uuid=False),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, index=True),
    )


def downgrade() -> None:
    """Drop product_images and products tables."""
    op.drop_table('product_images')
    op.drop_table('products')
