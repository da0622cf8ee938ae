"""
Subscriptions namespace for managing user subscriptions.
"""
from flask_restx import Namespace

subscription_ns = Namespace(
    'subscriptions',
    description='User subscription operations'
)

from . import routes  # noqa: E402,F401
