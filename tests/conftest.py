"""
Pytest configuration and fixtures for all tests.
"""

import json
from unittest.mock import MagicMock

import pytest

from app import create_app


@pytest.fixture
def app():
    """Application built from the testing configuration."""
    return create_app('testing')


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def address_response():
    """Facade answer for SW1A 1AA, as the address service returns it."""
    return {
        'results': [
            {
                'uprn': 10033544614,
                'address': 'BUCKINGHAM PALACE, LONDON, SW1A 1AA',
                'organisation': 'BUCKINGHAM PALACE',
                'premises': '',
                'street_address': '',
                'locality': '',
                'city': 'LONDON',
                'postcode': 'SW1A 1AA',
                'x': '529090.0',
                'y': '179645.0',
            }
        ]
    }


@pytest.fixture
def http_response(address_response):
    """requests.Response stand-in returning the facade answer."""
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = address_response
    response.content = json.dumps(address_response).encode()
    response.raise_for_status.return_value = None
    return response
