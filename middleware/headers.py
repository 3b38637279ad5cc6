# middleware/headers.py
"""
Response headers added to every response
"""

from flask import current_app, g, request


def resolve_locale() -> str:
    """Best match of Accept-Language against the supported locales"""
    supported = current_app.config.get('LANGUAGES') or []
    default = current_app.config.get('DEFAULT_LOCALE', 'en')
    return request.accept_languages.best_match(supported) or default


def set_locale():
    """Store the active locale for the current request"""
    g.locale = resolve_locale()


def content_language(response):
    """Advertise the active locale on the response"""
    locale = g.get('locale') or current_app.config.get('DEFAULT_LOCALE', 'en')
    response.headers['Content-Language'] = locale
    return response


def security_headers(response):
    """Add the browser hardening headers configured for the app"""
    for name, value in current_app.config.get('SECURITY_HEADERS', {}).items():
        response.headers.setdefault(name, value)
    return response
