"""
Base model with common fields and utility methods.
"""
from datetime import UTC, datetime

from subscription_service import db


def utcnow():
    """Current UTC time."""
    return datetime.now(UTC)


class BaseModel(db.Model):
    """
    Base model class that includes the timestamp columns shared by all models.

    Timestamps are assigned by the service layer; the column defaults only
    cover rows inserted outside of it.
    """
    __abstract__ = True

    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
