"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """
    Create the property management schema.

    Creates:
    - profiles, landlords
    - properties, units
    - tenants, tenant_payments
    """
    # 1. Profiles (id is the identity provider's user id)
    op.create_table(
        'profiles',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('first_name', sa.String(length=255), nullable=True),
        sa.Column('last_name', sa.String(length=255), nullable=True),
        sa.Column('role', sa.String(length=8), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_profiles_email', 'profiles', ['email'])
    op.create_index('ix_profiles_role', 'profiles', ['role'])

    # 2. Landlords
    op.create_table(
        'landlords',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('profile_id', sa.String(length=255), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('address', sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['profile_id'], ['profiles.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_landlords_profile_id', 'landlords', ['profile_id'])

    # 3. Properties
    op.create_table(
        'properties',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('landlord_id', sa.Integer(), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('property_type', sa.String(length=9), nullable=False),
        sa.Column('listing_type', sa.String(length=4), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=True),
        sa.Column('city', sa.String(length=100), nullable=True),
        sa.Column('state', sa.String(length=100), nullable=True),
        sa.Column('zip_code', sa.String(length=20), nullable=True),
        sa.Column('bedrooms', sa.Integer(), nullable=True),
        sa.Column('bathrooms', sa.Integer(), nullable=True),
        sa.Column('square_feet', sa.Integer(), nullable=True),
        sa.Column('rent_amount', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('sale_price', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('deposit_amount', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('currency', sa.String(length=3), nullable=False),
        sa.Column('parking', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('furnished', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('status', sa.String(length=8), nullable=False),
        sa.Column('amenities', sa.JSON(), nullable=True),
        sa.Column('images', sa.JSON(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['landlord_id'], ['landlords.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_properties_landlord_id', 'properties', ['landlord_id'])
    op.create_index('ix_properties_status', 'properties', ['status'])

    # 4. Units
    op.create_table(
        'units',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('unit_number', sa.String(length=50), nullable=False),
        sa.Column('bedrooms', sa.Integer(), nullable=True),
        sa.Column('rent_amount', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('status', sa.String(length=17), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_units_property_id', 'units', ['property_id'])

    # 5. Tenants
    op.create_table(
        'tenants',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('property_id', sa.Integer(), nullable=True),
        sa.Column('unit_id', sa.Integer(), nullable=True),
        sa.Column('monthly_rent', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('balance', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('prepaid_balance', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('total_paid', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('rent_due_day', sa.Integer(), nullable=True),
        sa.Column('payment_status', sa.String(length=7), nullable=True),
        sa.Column('last_due_processed', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_payment_date', sa.Date(), nullable=True),
        sa.Column('status', sa.String(length=8), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['unit_id'], ['units.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_tenants_property_id', 'tenants', ['property_id'])
    op.create_index('ix_tenants_unit_id', 'tenants', ['unit_id'])
    op.create_index('ix_tenants_status', 'tenants', ['status'])

    # 6. Payments
    op.create_table(
        'tenant_payments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=True),
        sa.Column('payment_date', sa.Date(), nullable=True),
        sa.Column('payment_method', sa.String(length=50), nullable=True),
        sa.Column('payment_period', sa.String(length=7), nullable=True),
        sa.Column('status', sa.String(length=9), nullable=False),
        sa.Column('receipt_number', sa.String(length=50), nullable=True),
        sa.Column('external_reference', sa.String(length=255), nullable=True),
        sa.Column('overpayment_credit', sa.Numeric(precision=15, scale=2), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_tenant_payments_tenant_id', 'tenant_payments', ['tenant_id'])
    op.create_index('ix_tenant_payments_payment_date', 'tenant_payments', ['payment_date'])
    op.create_index('ix_tenant_payments_tenant_date', 'tenant_payments', ['tenant_id', 'payment_date'])


def downgrade() -> None:
    """Drop every table, children first."""
    op.drop_table('tenant_payments')
    op.drop_table('tenants')
    op.drop_table('units')
    op.drop_table('properties')
    op.drop_table('landlords')
    op.drop_table('profiles')
