"""
Subscription model: a user's paid access to a named service over a month range.
"""
from sqlalchemy import CheckConstraint, Index, Uuid

from subscription_service import db

from .base import BaseModel


class Subscription(BaseModel):
    """
    Subscription record.

    Attributes:
        id (UUID): Identifier generated on creation, never changed
        service_name (str): Label of the subscribed service
        price (int): Monthly price in whole currency units, strictly positive
        user_id (UUID): Owning user; not checked against any users table
        start_date (date): First month of the subscription (day is always 1)
        end_date (date): Last month of the subscription, None while ongoing
    """
    __tablename__ = 'subscriptions'

    id = db.Column(Uuid, primary_key=True)
    service_name = db.Column(db.String(255), nullable=False)
    price = db.Column(db.Integer, nullable=False)
    user_id = db.Column(Uuid, nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=True)

    __table_args__ = (
        CheckConstraint('price > 0', name='ck_subscriptions_price_positive'),
        Index('idx_subscriptions_user_id', 'user_id'),
        Index('idx_subscriptions_service_name', 'service_name'),
        Index('idx_subscriptions_start_date', 'start_date'),
        Index('idx_subscriptions_end_date', 'end_date'),
    )

    def __repr__(self):
        """String representation of the Subscription model."""
        return f"<Subscription {self.id} {self.service_name} User:{self.user_id}>"
