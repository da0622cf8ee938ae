"""Create subscriptions table

Revision ID: 3b9e1f6a2c7d
Revises:
Create Date: 2025-07-14 09:21:37.418205

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b9e1f6a2c7d'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'subscriptions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('service_name', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('price > 0', name='ck_subscriptions_price_positive'),
        sa.PrimaryKeyConstraint('id')
    )

    # Indexes for the list and total-cost filters
    with op.batch_alter_table('subscriptions', schema=None) as batch_op:
        batch_op.create_index('idx_subscriptions_user_id', ['user_id'], unique=False)
        batch_op.create_index('idx_subscriptions_service_name', ['service_name'], unique=False)
        batch_op.create_index('idx_subscriptions_start_date', ['start_date'], unique=False)
        batch_op.create_index('idx_subscriptions_end_date', ['end_date'], unique=False)


def downgrade():
    with op.batch_alter_table('subscriptions', schema=None) as batch_op:
        batch_op.drop_index('idx_subscriptions_end_date')
        batch_op.drop_index('idx_subscriptions_start_date')
        batch_op.drop_index('idx_subscriptions_service_name')
        batch_op.drop_index('idx_subscriptions_user_id')

    op.drop_table('subscriptions')
