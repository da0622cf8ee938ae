"""
Models package for SQLAlchemy database models.
"""
from .base import BaseModel, utcnow
from .subscription import Subscription

__all__ = [
    'BaseModel',
    'Subscription',
    'utcnow',
]
