"""
Tests for headers added to every response.
"""

from unittest.mock import AsyncMock, patch

import pytest


ALL_ROUTES = [
    ('get', '/', None),
    ('get', '/welcome', None),
    ('get', '/healthcheck', None),
    ('get', '/address', None),
    ('post', '/address', {'postcode': 'SW1A 1AA'}),
    ('get', '/email', None),
    ('post', '/email', {'recipient': 'someone@example.com'}),
    ('get', '/does-not-exist', None),
]


class TestContentLanguage:
    """Content-Language reflects the active locale."""

    @pytest.mark.parametrize('method,path,data', ALL_ROUTES)
    @patch('services.mailer.aiosmtplib.send', new_callable=AsyncMock)
    @patch('services.address_lookup.requests.get')
    def test_every_route_sets_header(self, mock_get, mock_send, client, http_response, method, path, data):
        mock_get.return_value = http_response

        response = getattr(client, method)(path, data=data)

        assert response.headers.get('Content-Language')

    def test_defaults_to_english(self, client):
        response = client.get('/')

        assert response.headers['Content-Language'] == 'en'

    def test_negotiates_supported_locale(self, client):
        response = client.get('/', headers={'Accept-Language': 'cy, en;q=0.5'})

        assert response.headers['Content-Language'] == 'cy'

    def test_unsupported_locale_falls_back_to_default(self, client):
        response = client.get('/', headers={'Accept-Language': 'fr'})

        assert response.headers['Content-Language'] == 'en'

    def test_template_uses_locale(self, client):
        response = client.get('/address', headers={'Accept-Language': 'cy'})

        assert '<html lang="cy">' in response.get_data(as_text=True)


class TestSecurityHeaders:
    """Browser hardening headers."""

    def test_default_headers_present(self, client):
        response = client.get('/healthcheck')

        assert response.headers['X-Frame-Options'] == 'SAMEORIGIN'
        assert response.headers['X-Content-Type-Options'] == 'nosniff'
        assert response.headers['Referrer-Policy'] == 'strict-origin-when-cross-origin'
