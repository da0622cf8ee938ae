"""
Routes for user subscriptions.
"""

from flask import current_app, request
from flask_restx import Resource, fields, reqparse

from subscription_service import SERVICE_EXTENSION_KEY
from subscription_service.errors import ValidationError
from subscription_service.schemas import (
    parse_create_payload,
    parse_filter_args,
    parse_update_payload,
    parse_uuid,
)
from subscription_service.utils.dates import format_month_year

from . import subscription_ns


class MonthYear(fields.Raw):
    """Date rendered as ``MM-YYYY``."""

    __schema_type__ = 'string'
    __schema_example__ = '01-2024'

    def format(self, value):
        return format_month_year(value)


# Define the subscription model for API
subscription_model = subscription_ns.model('Subscription', {
    'id': fields.String(description='Subscription ID (UUID)'),
    'serviceName': fields.String(attribute='service_name', description='Service name'),
    'price': fields.Integer(description='Monthly price in whole currency units'),
    'userId': fields.String(attribute='user_id', description='User ID (UUID)'),
    'startDate': MonthYear(attribute='start_date', description='First month (MM-YYYY)'),
    'endDate': MonthYear(attribute='end_date', description='Last month (MM-YYYY), null while ongoing'),
    'createdAt': fields.DateTime(attribute='created_at', description='Creation date'),
    'updatedAt': fields.DateTime(attribute='updated_at', description='Last update date'),
})

# Input model for creating a subscription
subscription_input_model = subscription_ns.model('SubscriptionInput', {
    'serviceName': fields.String(required=True, description='Service name', example='Netflix'),
    'price': fields.Integer(required=True, description='Monthly price, greater than zero', example=400),
    'userId': fields.String(required=True, description='User ID (UUID)'),
    'startDate': fields.String(required=True, description='First month (MM-YYYY)', example='07-2025'),
    'endDate': fields.String(description='Last month (MM-YYYY)', example='12-2025'),
})

# Input model for partial updates
subscription_update_model = subscription_ns.model('SubscriptionUpdateInput', {
    'serviceName': fields.String(description='Service name'),
    'price': fields.Integer(description='Monthly price, greater than zero'),
    'startDate': fields.String(description='First month (MM-YYYY)'),
    'endDate': fields.String(description='Last month (MM-YYYY); empty string clears it'),
})

message_model = subscription_ns.model('Message', {
    'message': fields.String(description='Result message'),
})

total_cost_model = subscription_ns.model('TotalCost', {
    'totalCost': fields.Integer(description='Sum of matching subscription prices'),
})

error_model = subscription_ns.model('Error', {
    'error': fields.String(description='Error message'),
})

# Request parsers
subscription_list_parser = reqparse.RequestParser()
subscription_list_parser.add_argument(
    "user_id", type=str, help="Filter by user ID (UUID)", location="args"
)
subscription_list_parser.add_argument(
    "service_name", type=str, help="Case-insensitive service name substring", location="args"
)

total_cost_parser = subscription_list_parser.copy()
total_cost_parser.add_argument(
    "start_date", type=str, help="Period start (MM-YYYY)", location="args"
)
total_cost_parser.add_argument(
    "end_date", type=str, help="Period end (MM-YYYY)", location="args"
)


def get_service():
    return current_app.extensions[SERVICE_EXTENSION_KEY]


def get_json_body():
    payload = request.get_json(silent=True)
    if payload is None:
        raise ValidationError("invalid JSON body")
    return payload


def parse_subscription_id(value):
    return parse_uuid(value, "invalid subscription id")


@subscription_ns.route('')
class SubscriptionList(Resource):
    """Resource for listing and creating subscriptions"""

    @subscription_ns.doc('list_subscriptions')
    @subscription_ns.expect(subscription_list_parser)
    @subscription_ns.response(400, 'Invalid user id', error_model)
    @subscription_ns.marshal_list_with(subscription_model)
    def get(self):
        """List subscriptions, most recent first"""
        subscription_filter = parse_filter_args(subscription_list_parser.parse_args())
        return get_service().list_subscriptions(subscription_filter)

    @subscription_ns.doc('create_subscription')
    @subscription_ns.expect(subscription_input_model)
    @subscription_ns.response(400, 'Invalid body or date', error_model)
    @subscription_ns.marshal_with(subscription_model, code=201)
    def post(self):
        """Create a subscription"""
        subscription_request = parse_create_payload(get_json_body())
        subscription = get_service().create_subscription(subscription_request)
        return subscription, 201


@subscription_ns.route('/total-cost')
class SubscriptionTotalCost(Resource):
    """Resource for aggregating subscription cost"""

    @subscription_ns.doc('get_total_cost')
    @subscription_ns.expect(total_cost_parser)
    @subscription_ns.response(400, 'Invalid user id or date', error_model)
    @subscription_ns.marshal_with(total_cost_model)
    def get(self):
        """Total price of subscriptions active in a period"""
        subscription_filter = parse_filter_args(total_cost_parser.parse_args(), with_period=True)
        return {'totalCost': get_service().get_total_cost(subscription_filter)}


@subscription_ns.route('/<string:id>')
@subscription_ns.param('id', 'The subscription identifier (UUID)')
class SubscriptionResource(Resource):
    """Resource for individual subscription operations"""

    @subscription_ns.doc('get_subscription')
    @subscription_ns.response(400, 'Invalid subscription id', error_model)
    @subscription_ns.response(404, 'Subscription not found', error_model)
    @subscription_ns.marshal_with(subscription_model)
    def get(self, id):
        """Get a subscription"""
        return get_service().get_subscription(parse_subscription_id(id))

    @subscription_ns.doc('update_subscription')
    @subscription_ns.expect(subscription_update_model)
    @subscription_ns.response(400, 'Invalid id, body or date', error_model)
    @subscription_ns.response(404, 'Subscription not found', error_model)
    @subscription_ns.marshal_with(message_model)
    def put(self, id):
        """Update some fields of a subscription"""
        subscription_id = parse_subscription_id(id)
        update_request = parse_update_payload(get_json_body())
        get_service().update_subscription(subscription_id, update_request)
        return {'message': 'subscription updated successfully'}

    @subscription_ns.doc('delete_subscription')
    @subscription_ns.response(400, 'Invalid subscription id', error_model)
    @subscription_ns.response(404, 'Subscription not found', error_model)
    @subscription_ns.marshal_with(message_model)
    def delete(self, id):
        """Delete a subscription"""
        get_service().delete_subscription(parse_subscription_id(id))
        return {'message': 'subscription deleted successfully'}
