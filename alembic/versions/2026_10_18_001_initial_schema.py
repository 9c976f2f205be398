"""Initial schema: tenants, users, catalog, events, bookings and tasks

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '001_initial_schema'
down_revision = None

# Enum labels are stored by member name, matching SQLModel's mapping
subscription_plan = sa.Enum('FREE', 'STARTER', 'PROFESSIONAL', 'ENTERPRISE', name='subscriptionplan')
subscription_status = sa.Enum('TRIALING', 'ACTIVE', 'PAST_DUE', 'CANCELED', name='subscriptionstatus')
user_role = sa.Enum('OWNER', 'ADMIN', 'MEMBER', name='userrole')
venue_type = sa.Enum('INDOOR', 'OUTDOOR', 'MIXED', name='venuetype')
client_type = sa.Enum('INDIVIDUAL', 'CORPORATE', name='clienttype')
performer_type = sa.Enum(
    'FIRE', 'MAGIC', 'CIRCUS', 'MUSIC', 'DANCE', 'COMEDY', 'INTERACTIVE', 'OTHER',
    name='performertype',
)
event_type = sa.Enum(
    'CORPORATE', 'WEDDING', 'FESTIVAL', 'PRIVATE_PARTY', 'GALA', 'CONCERT', 'PRODUCT_LAUNCH', 'OTHER',
    name='eventtype',
)
event_status = sa.Enum('PLANNING', 'CONFIRMED', 'IN_PROGRESS', 'COMPLETED', 'CANCELLED', name='eventstatus')
booking_status = sa.Enum('PENDING', 'CONFIRMED', 'COMPLETED', 'CANCELLED', name='bookingstatus')
task_status = sa.Enum('PENDING', 'IN_PROGRESS', 'COMPLETED', name='taskstatus')
task_priority = sa.Enum('LOW', 'MEDIUM', 'HIGH', 'URGENT', name='taskpriority')


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def _tenant_fk():
    return sa.Column('tenant_id', sa.Uuid(), sa.ForeignKey('tenants.id', ondelete='CASCADE'), nullable=False)


def upgrade():
    op.create_table(
        'tenants',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(100), nullable=False),
        sa.Column('subscription_plan', subscription_plan, nullable=False),
        sa.Column('subscription_status', subscription_status, nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_tenants_name', 'tenants', ['name'])
    op.create_index('ix_tenants_slug', 'tenants', ['slug'], unique=True)

    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        _tenant_fk(),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('role', user_role, nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_users_tenant_id', 'users', ['tenant_id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'venues',
        sa.Column('id', sa.Uuid(), primary_key=True),
        _tenant_fk(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('type', venue_type, nullable=False),
        sa.Column('address', sa.String(500), nullable=True),
        sa.Column('city', sa.String(100), nullable=True),
        sa.Column('capacity', sa.Integer(), nullable=True),
        sa.Column('setup_access_time', sa.String(5), nullable=True),
        sa.Column('curfew', sa.String(5), nullable=True),
        sa.Column('restrictions', sa.JSON(), nullable=False),
        sa.Column('contact_name', sa.String(255), nullable=True),
        sa.Column('contact_email', sa.String(255), nullable=True),
        sa.Column('contact_phone', sa.String(50), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_venues_tenant_id', 'venues', ['tenant_id'])
    op.create_index('ix_venues_name', 'venues', ['name'])
    op.create_index('ix_venues_city', 'venues', ['city'])

    op.create_table(
        'clients',
        sa.Column('id', sa.Uuid(), primary_key=True),
        _tenant_fk(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('company', sa.String(255), nullable=True),
        sa.Column('address', sa.String(500), nullable=True),
        sa.Column('city', sa.String(100), nullable=True),
        sa.Column('client_type', client_type, nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('notes', sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_clients_tenant_id', 'clients', ['tenant_id'])
    op.create_index('ix_clients_name', 'clients', ['name'])
    op.create_index('ix_clients_email', 'clients', ['email'])
    op.create_index('ix_clients_client_type', 'clients', ['client_type'])

    op.create_table(
        'performers',
        sa.Column('id', sa.Uuid(), primary_key=True),
        _tenant_fk(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('stage_name', sa.String(255), nullable=True),
        sa.Column('type', performer_type, nullable=False),
        sa.Column('bio', sa.String(), nullable=True),
        sa.Column('specialties', sa.JSON(), nullable=False),
        sa.Column('setup_time', sa.Integer(), nullable=False),
        sa.Column('performance_time', sa.Integer(), nullable=False),
        sa.Column('breakdown_time', sa.Integer(), nullable=False),
        sa.Column('requirements', sa.JSON(), nullable=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('website', sa.String(500), nullable=True),
        sa.Column('standard_rate', sa.Numeric(12, 2), nullable=True),
        sa.Column('availability', sa.JSON(), nullable=True),
        sa.Column('rating', sa.Numeric(3, 2), nullable=True),
        sa.Column('total_bookings', sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_performers_tenant_id', 'performers', ['tenant_id'])
    op.create_index('ix_performers_name', 'performers', ['name'])
    op.create_index('ix_performers_type', 'performers', ['type'])

    op.create_table(
        'events',
        sa.Column('id', sa.Uuid(), primary_key=True),
        _tenant_fk(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('type', event_type, nullable=False),
        sa.Column('status', event_status, nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('start_time', sa.String(5), nullable=False),
        sa.Column('end_time', sa.String(5), nullable=False),
        sa.Column('guest_count', sa.Integer(), nullable=True),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('venue_id', sa.Uuid(), sa.ForeignKey('venues.id', ondelete='SET NULL'), nullable=True),
        sa.Column('venue_custom', sa.String(500), nullable=True),
        sa.Column('client_id', sa.Uuid(), sa.ForeignKey('clients.id', ondelete='SET NULL'), nullable=True),
        sa.Column('total_budget', sa.Numeric(12, 2), nullable=True),
        sa.Column('spent_amount', sa.Numeric(12, 2), nullable=True),
        sa.Column('timeline', sa.JSON(), nullable=True),
        sa.Column('created_by_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_events_tenant_id', 'events', ['tenant_id'])
    op.create_index('ix_events_type', 'events', ['type'])
    op.create_index('ix_events_status', 'events', ['status'])
    op.create_index('ix_events_date', 'events', ['date'])
    op.create_index('ix_events_venue_id', 'events', ['venue_id'])
    op.create_index('ix_events_client_id', 'events', ['client_id'])
    op.create_index('ix_events_created_by_id', 'events', ['created_by_id'])

    op.create_table(
        'bookings',
        sa.Column('id', sa.Uuid(), primary_key=True),
        _tenant_fk(),
        sa.Column('event_id', sa.Uuid(), sa.ForeignKey('events.id', ondelete='CASCADE'), nullable=False),
        sa.Column('performer_id', sa.Uuid(), sa.ForeignKey('performers.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', booking_status, nullable=False),
        sa.Column('call_time', sa.String(5), nullable=True),
        sa.Column('setup_start', sa.String(5), nullable=True),
        sa.Column('performance_start', sa.String(5), nullable=True),
        sa.Column('performance_end', sa.String(5), nullable=True),
        sa.Column('load_out', sa.String(5), nullable=True),
        sa.Column('agreed_rate', sa.Numeric(12, 2), nullable=False),
        sa.Column('deposit', sa.Numeric(12, 2), nullable=True),
        sa.Column('paid_amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('contract_signed', sa.Boolean(), nullable=False),
        sa.Column('contract_url', sa.String(500), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_bookings_tenant_id', 'bookings', ['tenant_id'])
    op.create_index('ix_bookings_event_id', 'bookings', ['event_id'])
    op.create_index('ix_bookings_performer_id', 'bookings', ['performer_id'])
    op.create_index('ix_bookings_status', 'bookings', ['status'])

    op.create_table(
        'event_tasks',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('event_id', sa.Uuid(), sa.ForeignKey('events.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('status', task_status, nullable=False),
        sa.Column('priority', task_priority, nullable=False),
        sa.Column('due_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('assigned_to', sa.String(255), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_event_tasks_event_id', 'event_tasks', ['event_id'])
    op.create_index('ix_event_tasks_status', 'event_tasks', ['status'])


def downgrade():
    for table in ('event_tasks', 'bookings', 'events', 'performers', 'clients', 'venues', 'users', 'tenants'):
        op.drop_table(table)

    bind = op.get_bind()
    for enum in (
        task_priority, task_status, booking_status, event_status, event_type,
        performer_type, client_type, venue_type, user_role, subscription_status, subscription_plan,
    ):
        enum.drop(bind, checkfirst=True)
