# config/settings.py
"""
Environment-driven configuration for the demo application

Values are read once, when this module is imported, and handed to the
outbound-call services by the application factory.
"""

import os
import secrets


def _int_or_none(value):
    return int(value) if value else None


class Config:
    """Settings shared by every environment"""

    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_urlsafe(32)

    # Address facade microservice
    ADDRESS_SERVICE_URL = os.environ.get('ADDRESS_SERVICE_URL', 'http://address:9002')

    # SMTP delivery, passed through verbatim to the mail client
    EMAIL_HOST = os.environ.get('EMAIL_HOST', 'localhost')
    EMAIL_PORT = _int_or_none(os.environ.get('EMAIL_PORT'))
    EMAIL_USERNAME = os.environ.get('EMAIL_USERNAME')
    EMAIL_PASSWORD = os.environ.get('EMAIL_PASSWORD')
    APP_URL = os.environ.get('APP_URL', 'localhost')

    # Locale used for the Content-Language header
    DEFAULT_LOCALE = os.environ.get('DEFAULT_LOCALE', 'en')
    LANGUAGES = [lang.strip() for lang in os.environ.get('LANGUAGES', 'en').split(',') if lang.strip()]

    # CSRF protection
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600  # 1 hour

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FILE = os.environ.get('LOG_FILE')
    SLOW_REQUEST_THRESHOLD = int(os.environ.get('SLOW_REQUEST_THRESHOLD', 1000))  # ms

    # Response headers added to every response
    SECURITY_HEADERS = {
        'X-Frame-Options': 'SAMEORIGIN',
        'X-Content-Type-Options': 'nosniff',
        'Referrer-Policy': 'strict-origin-when-cross-origin',
    }


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    WTF_CSRF_ENABLED = False

    # Let failures reach the 500 handler instead of the test client
    PROPAGATE_EXCEPTIONS = False

    ADDRESS_SERVICE_URL = 'http://address.test:9002'
    EMAIL_HOST = 'smtp.test'
    EMAIL_PORT = 1025
    EMAIL_USERNAME = None
    EMAIL_PASSWORD = None
    DEFAULT_LOCALE = 'en'
    LANGUAGES = ['en', 'cy']


class ProductionConfig(Config):
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


CONFIGS = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
}
