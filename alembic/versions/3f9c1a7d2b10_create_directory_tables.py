"""create_directory_tables

Revision ID: 3f9c1a7d2b10
Revises:
Create Date: 2026-10-19 10:12:45.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3f9c1a7d2b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

certification_type = postgresql.ENUM('HALAL', 'ZABIHAH', name='certification_type', create_type=False)
certification_status = postgresql.ENUM(
    'CERTIFIED', 'PENDING', 'EXPIRED', 'REVOKED', name='certification_status', create_type=False
)
restaurant_type = postgresql.ENUM(
    'CASUAL', 'FINE_DINING', 'FAST_FOOD', 'CAFE', name='restaurant_type', create_type=False
)
store_type = postgresql.ENUM(
    'GROCERY', 'BUTCHER', 'SUPERMARKET', 'SPECIALTY', name='store_type', create_type=False
)

EMPTY_TEXT_ARRAY = sa.text("'{}'::text[]")


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def _text_array(name):
    return sa.Column(name, postgresql.ARRAY(sa.Text()), server_default=EMPTY_TEXT_ARRAY, nullable=False)


def _listing_columns():
    """Columns shared by meat_houses, restaurants and stores (before the specific ones)."""
    return [
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('external_id', sa.String(), nullable=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('address_id', sa.Integer(), sa.ForeignKey('addresses.id'), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('email', sa.String(), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    bind = op.get_bind()
    for enum_type in (certification_type, certification_status, restaurant_type, store_type):
        enum_type.create(bind, checkfirst=True)

    op.create_table(
        'organizations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('organization_id', sa.Integer(), sa.ForeignKey('organizations.id'), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_organization_id'), 'users', ['organization_id'], unique=False)

    op.create_table(
        'addresses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('street', sa.String(), nullable=False),
        sa.Column('city', sa.String(), nullable=False),
        sa.Column('state', sa.String(), nullable=False),
        sa.Column('zip_code', sa.String(), nullable=False),
        sa.Column('country', sa.String(), server_default='USA', nullable=False),
        sa.Column('lat', sa.Float(precision=53), nullable=True),
        sa.Column('lng', sa.Float(precision=53), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'certifiers',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('website', sa.String(), nullable=True),
        sa.Column('logo_url', sa.String(), nullable=True),
        sa.Column('contact_email', sa.String(), nullable=True),
        sa.Column('contact_phone', sa.String(), nullable=True),
        sa.Column('certification_type', certification_type, nullable=False),
        sa.Column('certification_since', sa.DateTime(), nullable=True),
        sa.Column('last_inspection_date', sa.DateTime(), nullable=True),
        sa.Column('certification_expiry', sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'entity_certifications',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('entity_type', sa.String(), nullable=False),
        sa.Column('entity_id', sa.Integer(), nullable=False),
        sa.Column('certifier_id', sa.Integer(), sa.ForeignKey('certifiers.id'), nullable=True),
        sa.Column('certification_status', certification_status, server_default='CERTIFIED', nullable=False),
        sa.Column('certified_since', sa.DateTime(), nullable=True),
        sa.Column('expires_at', sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(
        op.f('ix_entity_certifications_certifier_id'), 'entity_certifications', ['certifier_id'], unique=False
    )

    op.create_table(
        'meat_houses',
        *_listing_columns(),
        _text_array('meat_types'),
        _text_array('slaughter_methods'),
        sa.Column('business_hours', postgresql.JSONB(), nullable=True),
        sa.Column('social_media', postgresql.JSONB(), nullable=True),
        sa.Column('wholesale_available', sa.Boolean(), nullable=True),
        sa.Column('retail_available', sa.Boolean(), nullable=True),
        sa.Column('ratings', postgresql.JSONB(), nullable=True),
        sa.Column('reviews', postgresql.JSONB(), nullable=True),
        _text_array('images'),
        sa.Column('last_updated', sa.DateTime(), nullable=True),
        sa.Column('additional_notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'restaurants',
        *_listing_columns(),
        _text_array('cuisine_types'),
        _text_array('specialties'),
        sa.Column('price_range', sa.String(), nullable=True),
        sa.Column('restaurant_type', restaurant_type, nullable=True),
        sa.Column('business_hours', postgresql.JSONB(), nullable=True),
        sa.Column('social_media', postgresql.JSONB(), nullable=True),
        sa.Column('menu', postgresql.JSONB(), nullable=True),
        sa.Column('ratings', postgresql.JSONB(), nullable=True),
        sa.Column('reviews', postgresql.JSONB(), nullable=True),
        _text_array('delivery_options'),
        sa.Column('takeout_available', sa.Boolean(), nullable=True),
        sa.Column('reservations_available', sa.Boolean(), nullable=True),
        sa.Column('has_alcohol', sa.Boolean(), server_default=sa.false(), nullable=False),
        _text_array('images'),
        sa.Column('last_updated', sa.DateTime(), nullable=True),
        sa.Column('additional_notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'stores',
        *_listing_columns(),
        sa.Column('store_type', store_type, nullable=False),
        sa.Column('business_hours', postgresql.JSONB(), nullable=True),
        sa.Column('social_media', postgresql.JSONB(), nullable=True),
        _text_array('product_categories'),
        sa.Column('ratings', postgresql.JSONB(), nullable=True),
        sa.Column('reviews', postgresql.JSONB(), nullable=True),
        sa.Column('delivery_available', sa.Boolean(), nullable=True),
        sa.Column('online_ordering', sa.Boolean(), nullable=True),
        _text_array('images'),
        sa.Column('last_updated', sa.DateTime(), nullable=True),
        sa.Column('additional_notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )

    for table in ('meat_houses', 'restaurants', 'stores'):
        op.create_index(op.f(f'ix_{table}_address_id'), table, ['address_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    for table in ('stores', 'restaurants', 'meat_houses'):
        op.drop_index(op.f(f'ix_{table}_address_id'), table_name=table)
        op.drop_table(table)

    op.drop_index(op.f('ix_entity_certifications_certifier_id'), table_name='entity_certifications')
    op.drop_table('entity_certifications')
    op.drop_table('certifiers')
    op.drop_table('addresses')
    op.drop_index(op.f('ix_users_organization_id'), table_name='users')
    op.drop_table('users')
    op.drop_table('organizations')

    bind = op.get_bind()
    for enum_type in (store_type, restaurant_type, certification_status, certification_type):
        enum_type.drop(bind, checkfirst=True)
