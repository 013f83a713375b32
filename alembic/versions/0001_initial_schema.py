"""Create users, events, tickets, notifications and feedbacks tables

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19

Delete policies live on the foreign keys:
events.organizer_id RESTRICT, tickets.event_id CASCADE, tickets.user_id RESTRICT,
notifications.user_id CASCADE, notifications.event_id SET NULL,
feedbacks.event_id CASCADE, feedbacks.user_id RESTRICT.
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None

user_role = sa.Enum('attendee', 'organizer', 'admin', name='userrole')
ticket_status = sa.Enum('booked', 'cancelled', 'attended', name='ticketstatus')


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('user_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('password_hash', sa.String(length=100), nullable=False),
        sa.Column('contact_number', sa.String(length=20), nullable=True),
        sa.Column('role', user_role, nullable=False),
        sa.CheckConstraint('length(name) <= 100', name='ck_users_name_max_length'),
        sa.CheckConstraint('length(email) <= 100', name='ck_users_email_max_length'),
        sa.CheckConstraint('length(password_hash) <= 100', name='ck_users_password_hash_max_length'),
        sa.CheckConstraint('length(contact_number) <= 20', name='ck_users_contact_number_max_length'),
        sa.PrimaryKeyConstraint('user_id', name='pk_users'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'events',
        sa.Column('event_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=False),
        sa.Column('location', sa.String(length=200), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('organizer_id', sa.Integer(), nullable=False),
        sa.CheckConstraint('length(name) <= 100', name='ck_events_name_max_length'),
        sa.CheckConstraint('length(category) <= 50', name='ck_events_category_max_length'),
        sa.CheckConstraint('length(location) <= 200', name='ck_events_location_max_length'),
        sa.ForeignKeyConstraint(
            ['organizer_id'], ['users.user_id'],
            name='fk_events_organizer_id_users', ondelete='RESTRICT',
        ),
        sa.PrimaryKeyConstraint('event_id', name='pk_events'),
    )
    op.create_index('ix_events_category', 'events', ['category'])
    op.create_index('ix_events_date', 'events', ['date'])
    op.create_index('ix_events_organizer_id', 'events', ['organizer_id'])

    op.create_table(
        'tickets',
        sa.Column('ticket_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('booking_date', sa.DateTime(), nullable=False),
        sa.Column('status', ticket_status, nullable=False),
        sa.ForeignKeyConstraint(
            ['event_id'], ['events.event_id'],
            name='fk_tickets_event_id_events', ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['user_id'], ['users.user_id'],
            name='fk_tickets_user_id_users', ondelete='RESTRICT',
        ),
        sa.PrimaryKeyConstraint('ticket_id', name='pk_tickets'),
    )
    op.create_index('ix_tickets_event_id', 'tickets', ['event_id'])
    op.create_index('ix_tickets_user_id', 'tickets', ['user_id'])

    op.create_table(
        'notifications',
        sa.Column('notification_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=True),
        sa.Column('message', sa.String(length=500), nullable=False),
        sa.Column('sent_timestamp', sa.DateTime(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False),
        sa.CheckConstraint('length(message) <= 500', name='ck_notifications_message_max_length'),
        sa.ForeignKeyConstraint(
            ['user_id'], ['users.user_id'],
            name='fk_notifications_user_id_users', ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['event_id'], ['events.event_id'],
            name='fk_notifications_event_id_events', ondelete='SET NULL',
        ),
        sa.PrimaryKeyConstraint('notification_id', name='pk_notifications'),
    )
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])
    op.create_index('ix_notifications_event_id', 'notifications', ['event_id'])
    op.create_index('ix_notifications_user_unread', 'notifications', ['user_id', 'is_read'])

    op.create_table(
        'feedbacks',
        sa.Column('feedback_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('comments', sa.String(length=500), nullable=True),
        sa.Column('submitted_timestamp', sa.DateTime(), nullable=False),
        sa.CheckConstraint('length(comments) <= 500', name='ck_feedbacks_comments_max_length'),
        sa.ForeignKeyConstraint(
            ['event_id'], ['events.event_id'],
            name='fk_feedbacks_event_id_events', ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['user_id'], ['users.user_id'],
            name='fk_feedbacks_user_id_users', ondelete='RESTRICT',
        ),
        sa.PrimaryKeyConstraint('feedback_id', name='pk_feedbacks'),
    )
    op.create_index('ix_feedbacks_event_id', 'feedbacks', ['event_id'])
    op.create_index('ix_feedbacks_user_id', 'feedbacks', ['user_id'])


def downgrade() -> None:
    op.drop_table('feedbacks')
    op.drop_table('notifications')
    op.drop_table('tickets')
    op.drop_table('events')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
    ticket_status.drop(op.get_bind(), checkfirst=True)
    user_role.drop(op.get_bind(), checkfirst=True)
