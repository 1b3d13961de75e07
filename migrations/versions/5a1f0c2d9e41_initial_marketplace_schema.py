"""initial marketplace schema

Revision ID: 5a1f0c2d9e41
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '5a1f0c2d9e41'
down_revision = None
branch_labels = None
depends_on = None

BIGINT = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade():
    op.create_table(
        'shopkeeper',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('shop_name', sa.String(100)),
        sa.Column('location', sa.String(150)),
        sa.Column('city', sa.String(100)),
        sa.Column('phone', sa.String(15)),
        sa.Column('gst_number', sa.String(20)),
        sa.Column('established_year', sa.Integer()),
        sa.Column('is_verified', sa.Boolean()),
        sa.Column('created_at', sa.DateTime()),
    )
    op.create_index('ix_shopkeeper_email', 'shopkeeper', ['email'], unique=True)

    op.create_table(
        'shopkeeper_session',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('shopkeeper_id', BIGINT, sa.ForeignKey('shopkeeper.id'), nullable=False),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.Column('user_agent', sa.String(300)),
    )
    op.create_index('ix_shopkeeper_session_shopkeeper_id', 'shopkeeper_session', ['shopkeeper_id'])

    op.create_table(
        'item',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('shopkeeper_id', BIGINT, sa.ForeignKey('shopkeeper.id'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('brand', sa.String(50)),
        sa.Column('description', sa.Text()),
        sa.Column('category', sa.String(50)),
        sa.Column('sub_category', sa.String(50)),
        sa.Column('cost_price', sa.Float(), nullable=False),
        sa.Column('selling_price', sa.Float(), nullable=False),
        sa.Column('discount', sa.Float()),
        sa.Column('stock', sa.Integer()),
        sa.Column('min_stock_alert', sa.Integer()),
        sa.Column('unit', sa.String(20)),
        sa.Column('image', sa.String(255)),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('updated_at', sa.DateTime()),
    )
    op.create_index('ix_item_shopkeeper_id', 'item', ['shopkeeper_id'])

    op.create_table(
        'order',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('shopkeeper_id', BIGINT, sa.ForeignKey('shopkeeper.id'), nullable=False),
        sa.Column('item_id', BIGINT, sa.ForeignKey('item.id'), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(100), nullable=False),
        sa.Column('image', sa.String(255)),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('ix_order_shopkeeper_created', 'order', ['shopkeeper_id', 'created_at'])


def downgrade():
    op.drop_index('ix_order_shopkeeper_created', table_name='order')
    op.drop_table('order')
    op.drop_index('ix_item_shopkeeper_id', table_name='item')
    op.drop_table('item')
    op.drop_index('ix_shopkeeper_session_shopkeeper_id', table_name='shopkeeper_session')
    op.drop_table('shopkeeper_session')
    op.drop_index('ix_shopkeeper_email', table_name='shopkeeper')
    op.drop_table('shopkeeper')
