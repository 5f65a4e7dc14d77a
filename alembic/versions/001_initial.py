"""Initial migration

Revision ID: 001
Revises:
Create Date: 2024-01-01 00:00:00.000000

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
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('email', sa.String(255), unique=True, nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(255)),
        sa.Column('phone', sa.String(20)),
        sa.Column('role', sa.Enum('ADMIN', 'MANAGER', 'STAFF_VIEWER', name='userrole'), default='STAFF_VIEWER'),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('refresh_token', sa.String(500)),
        sa.Column('last_login', sa.DateTime()),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )

    # Create categories table
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255)),
        sa.Column('description', sa.Text()),
        sa.Column('image_url', sa.String(500)),
        sa.Column('code', sa.String(50)),
        sa.Column('parent_id', sa.Integer(), sa.ForeignKey('categories.id'), nullable=True),
        sa.Column('view_order', sa.Integer(), default=0),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )

    # Create menu_items table
    op.create_table(
        'menu_items',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('image_url', sa.String(500)),
        sa.Column('price_cents', sa.Integer(), nullable=False, default=0),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('categories.id'), nullable=True),
        sa.Column('is_popular', sa.Integer()),
        sa.Column('view_order', sa.Integer(), default=0),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
    )

    # Create addons and menu_item_addons tables
    op.create_table(
        'addons',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('price_cents', sa.Integer(), nullable=False, default=0),
        sa.Column('is_available', sa.Boolean(), default=True),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
    )

    op.create_table(
        'menu_item_addons',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('menu_item_id', sa.Integer(), sa.ForeignKey('menu_items.id'), nullable=False),
        sa.Column('addon_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('addons.id'), nullable=False),
        sa.Column('is_default', sa.Boolean(), default=False),
        sa.Column('is_required', sa.Boolean(), default=False),
        sa.Column('max_quantity', sa.Integer(), nullable=False, default=1),
        sa.UniqueConstraint('menu_item_id', 'addon_id', name='uq_menu_item_addon'),
    )

    # Create option group tables
    op.create_table(
        'menu_option_groups',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
    )

    op.create_table(
        'menu_options',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('price_adjustment_cents', sa.Integer(), default=0),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
    )

    op.create_table(
        'menu_option_group_options',
        sa.Column('option_group_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('menu_option_groups.id'), primary_key=True),
        sa.Column('option_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('menu_options.id'), primary_key=True),
    )

    op.create_table(
        'menu_item_option_groups',
        sa.Column('menu_item_id', sa.Integer(), sa.ForeignKey('menu_items.id'), primary_key=True),
        sa.Column('option_group_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('menu_option_groups.id'), primary_key=True),
    )

    # Create drivers table
    op.create_table(
        'drivers',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(30), nullable=False),
        sa.Column('email', sa.String(255)),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('vehicle_type', sa.String(50)),
        sa.Column('license_number', sa.String(100)),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), onupdate=sa.func.now()),
    )

    # Create orders table
    op.create_table(
        'orders',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', sa.String(255)),
        sa.Column('phone_number', sa.String(30), nullable=False),
        sa.Column('delivery_address', sa.Text()),
        sa.Column('delivery_method', sa.String(20)),
        sa.Column('delivery_latitude', sa.Float()),
        sa.Column('delivery_longitude', sa.Float()),
        sa.Column('driver_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('drivers.id')),
        sa.Column('tracking_id', sa.String(100)),
        sa.Column('order_items', postgresql.JSON(), nullable=False),
        sa.Column('order_note', sa.Text()),
        sa.Column('delivery_amount_cents', sa.Integer(), default=0),
        sa.Column('vat_cents', sa.Integer(), default=0),
        sa.Column('total_amount_cents', sa.Integer(), nullable=False, default=0),
        sa.Column('currency', sa.String(10)),
        sa.Column('reward_points', sa.Integer(), default=0),
        sa.Column('status', sa.String(30), default='ORDER_PLACED'),
        sa.Column('payment_method', sa.String(30)),
        sa.Column('payment_status', sa.String(20), default='PENDING'),
        sa.Column('transaction_id', sa.String(255)),
        sa.Column('payment_failure_reason', sa.Text()),
        sa.Column('payment_confirmed_at', sa.DateTime()),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )

    # Create deliveries table
    op.create_table(
        'deliveries',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('order_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('orders.id'), nullable=False),
        sa.Column('driver_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('drivers.id')),
        sa.Column('status', sa.String(20), default='pending'),
        sa.Column('customer_lat', sa.Float()),
        sa.Column('customer_lng', sa.Float()),
        sa.Column('driver_lat', sa.Float()),
        sa.Column('driver_lng', sa.Float()),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )

    # Create invoice tables
    op.create_table(
        'invoices',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('invoice_number', sa.String(50), unique=True, nullable=False),
        sa.Column('customer_name', sa.String(255)),
        sa.Column('table_number', sa.Integer()),
        sa.Column('server_name', sa.String(255)),
        sa.Column('status', sa.String(20), default='draft'),
        sa.Column('subtotal_cents', sa.Integer(), nullable=False, default=0),
        sa.Column('tax_amount_cents', sa.Integer(), nullable=False, default=0),
        sa.Column('tip_amount_cents', sa.Integer(), nullable=False, default=0),
        sa.Column('discount_amount_cents', sa.Integer(), nullable=False, default=0),
        sa.Column('total_amount_cents', sa.Integer(), nullable=False, default=0),
        sa.Column('payment_method', sa.String(30)),
        sa.Column('payment_date', sa.DateTime()),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )

    op.create_table(
        'invoice_items',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('invoice_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('invoices.id'), nullable=False),
        sa.Column('menu_item_id', sa.Integer(), sa.ForeignKey('menu_items.id')),
        sa.Column('description', sa.String(255), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False, default=1),
        sa.Column('unit_price_cents', sa.Integer(), nullable=False, default=0),
        sa.Column('total_price_cents', sa.Integer(), nullable=False, default=0),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
    )

    # Create payments table
    op.create_table(
        'payments',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('payment_number', sa.String(50), unique=True, nullable=False),
        sa.Column('customer_id', sa.String(255)),
        sa.Column('customer_name', sa.String(255)),
        sa.Column('invoice_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('invoices.id')),
        sa.Column('amount_paid_cents', sa.Integer(), nullable=False, default=0),
        sa.Column('payment_method', sa.String(30), nullable=False),
        sa.Column('payment_status', sa.String(20), default='PENDING'),
        sa.Column('transaction_id', sa.String(255)),
        sa.Column('payment_date', sa.DateTime(), default=sa.func.now()),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )

    # Create order_feedback table
    op.create_table(
        'order_feedback',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('order_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('orders.id'), nullable=False),
        sa.Column('user_id', sa.String(255), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('food_quality_rating', sa.Integer()),
        sa.Column('delivery_rating', sa.Integer()),
        sa.Column('comment', sa.Text()),
        sa.Column('status', sa.String(20), default='active'),
        sa.Column('is_anonymous', sa.Boolean(), default=False),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
        sa.Column('deleted_at', sa.DateTime()),
        sa.UniqueConstraint('order_id', 'user_id', name='uq_order_feedback_order_user'),
    )

    # Create rewards table
    op.create_table(
        'rewards',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', sa.String(255), unique=True, nullable=False),
        sa.Column('points', sa.Integer(), nullable=False, default=0),
        sa.Column('last_updated', sa.DateTime(), default=sa.func.now()),
    )

    # Create indexes
    op.create_index('ix_categories_parent_id', 'categories', ['parent_id'])
    op.create_index('ix_menu_items_category_id', 'menu_items', ['category_id'])
    op.create_index('ix_orders_created_at', 'orders', ['created_at'])
    op.create_index('ix_orders_status', 'orders', ['status'])
    op.create_index('ix_deliveries_order_id', 'deliveries', ['order_id'])
    op.create_index('ix_payments_payment_date', 'payments', ['payment_date'])


def downgrade() -> None:
    op.drop_table('rewards')
    op.drop_table('order_feedback')
    op.drop_table('payments')
    op.drop_table('invoice_items')
    op.drop_table('invoices')
    op.drop_table('deliveries')
    op.drop_table('orders')
    op.drop_table('drivers')
    op.drop_table('menu_item_option_groups')
    op.drop_table('menu_option_group_options')
    op.drop_table('menu_options')
    op.drop_table('menu_option_groups')
    op.drop_table('menu_item_addons')
    op.drop_table('addons')
    op.drop_table('menu_items')
    op.drop_table('categories')
    op.drop_table('users')
    sa.Enum(name='userrole').drop(op.get_bind(), checkfirst=True)
