# app.py
"""
Flask Application Factory for the Simple Flask Docker demo

Three endpoint groups, each a direct pass-through:
- Welcome and health check responses
- Postcode lookup relayed to the EA address facade microservice
- Test email delivery over SMTP

The factory wires together:
- Environment-based configuration
- Logging to stdout with an optional rotating file
- CSRF protection for the form posts
- Content-Language and browser hardening response headers
- The explicit route table
"""

import os
import logging
import logging.handlers
from datetime import datetime, timezone

from flask import Flask, g, request
from flask_wtf.csrf import CSRFProtect
from werkzeug.exceptions import InternalServerError
from werkzeug.middleware.proxy_fix import ProxyFix

from assets import STATIC_DIR, TEMPLATE_DIR
from config import CONFIGS
from middleware.headers import content_language, security_headers, set_locale
from routes import register_routes
from services import AddressLookupClient, Mailer, SMTPSettings


def setup_logging(app: Flask) -> None:
    """
    Configure application logging

    This setup provides:
    - Journal-friendly lines on stdout for container log collection
    - A rotating file with detailed lines when LOG_FILE is set
    - Quieter third-party loggers outside debug mode
    """
    # Remove default Flask handlers to avoid duplicate logs
    app.logger.handlers.clear()

    journal_formatter = logging.Formatter(
        fmt='%(name)s[%(process)d]: %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    detailed_formatter = logging.Formatter(
        fmt='%(asctime)s %(name)-20s %(levelname)-8s %(funcName)-15s:%(lineno)-4d %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    log_level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO').upper())
    app.logger.setLevel(log_level)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(journal_formatter)
    stream_handler.setLevel(log_level)
    app.logger.addHandler(stream_handler)

    # Service modules log under their own names
    services_logger = logging.getLogger('services')
    services_logger.setLevel(log_level)
    services_logger.handlers.clear()
    services_logger.addHandler(stream_handler)

    log_file = app.config.get('LOG_FILE')
    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(detailed_formatter)
        file_handler.setLevel(logging.DEBUG)
        app.logger.addHandler(file_handler)
        services_logger.addHandler(file_handler)

    if not app.debug:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)


def configure_services(app: Flask) -> None:
    """
    Build the outbound-call services from configuration
    """
    app.address_client = AddressLookupClient(app.config['ADDRESS_SERVICE_URL'])

    app.mailer = Mailer(SMTPSettings(
        host=app.config.get('EMAIL_HOST'),
        port=app.config.get('EMAIL_PORT'),
        username=app.config.get('EMAIL_USERNAME'),
        password=app.config.get('EMAIL_PASSWORD'),
        domain=app.config.get('APP_URL'),
    ))

    app.logger.info(f"Address lookups go to {app.config['ADDRESS_SERVICE_URL']}")
    app.logger.info(f"Email delivered via {app.config.get('EMAIL_HOST')}:{app.config.get('EMAIL_PORT')}")


def configure_error_handlers(app: Flask) -> None:
    """
    Log unhandled failures; the response stays Flask's generic 500
    """
    @app.errorhandler(InternalServerError)
    def internal_error(error):
        original = getattr(error, 'original_exception', None) or error
        # Flask has already logged the traceback
        app.logger.error(
            f"Request {request.method} {request.path} failed: {type(original).__name__}: {original}"
        )
        return error


def configure_request_middleware(app: Flask) -> None:
    """
    Configure request/response middleware for headers and monitoring
    """
    @app.before_request
    def before_request():
        # Store request start time for performance monitoring
        g.start_time = datetime.now(timezone.utc)
        set_locale()

    @app.after_request
    def after_request(response):
        response = content_language(response)
        response = security_headers(response)

        if hasattr(g, 'start_time'):
            duration = (datetime.now(timezone.utc) - g.start_time).total_seconds() * 1000
            if duration > app.config.get('SLOW_REQUEST_THRESHOLD', 1000):
                app.logger.warning(f"Slow request ({duration:.0f}ms): {request.method} {request.path}")

        return response


def create_app(config_name: str = None) -> Flask:
    """
    Flask application factory

    Args:
        config_name: Configuration environment ('development', 'testing', 'production')

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__,
                static_folder=str(STATIC_DIR),
                template_folder=str(TEMPLATE_DIR))

    config_name = config_name or os.environ.get('FLASK_ENV', 'production')
    if config_name not in CONFIGS:
        config_name = 'production'
    app.config.from_object(CONFIGS[config_name])

    # Configure proxy handling for production deployment behind a reverse proxy
    if config_name == 'production':
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    setup_logging(app)
    app.logger.info(f"Starting application in {config_name} mode")

    CSRFProtect(app)

    configure_services(app)
    register_routes(app)
    configure_error_handlers(app)
    configure_request_middleware(app)

    app.logger.info("Flask application factory completed successfully")
    return app


# WSGI application, configured from FLASK_ENV
application = create_app()

if __name__ == '__main__':
    # The debugger is only ever reachable from the local machine
    host = '127.0.0.1' if application.debug else '0.0.0.0'
    application.run(host=host, port=3000, threaded=True)
