"""
Integration tests for the API.
"""
import json


def test_health_endpoint(client):
    """Test the health endpoint returns a 200 response."""
    response = client.get('/health')
    assert response.status_code == 200
    data = json.loads(response.data)
    assert data['status'] == 'healthy'
    assert data['environment'] == 'testing'
    assert data['database_connected'] is True


def test_api_docs_endpoint(client):
    """Test the API docs endpoint returns a 200 response."""
    response = client.get('/api/docs')
    assert response.status_code == 200
    assert b'Swagger' in response.data


def test_swagger_json_lists_subscription_routes(client):
    response = client.get('/swagger.json')
    assert response.status_code == 200
    paths = json.loads(response.data)['paths']
    assert '/api/v1/subscriptions' in paths
    assert '/api/v1/subscriptions/total-cost' in paths
    assert '/api/v1/subscriptions/{id}' in paths


def test_swagger_json_documents_filter_parameters(client):
    response = client.get('/swagger.json')
    paths = json.loads(response.data)['paths']

    list_params = {p['name'] for p in paths['/api/v1/subscriptions']['get']['parameters']}
    assert list_params == {'user_id', 'service_name'}

    cost_params = {p['name'] for p in paths['/api/v1/subscriptions/total-cost']['get']['parameters']}
    assert cost_params == {'user_id', 'service_name', 'start_date', 'end_date'}
