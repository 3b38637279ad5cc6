# routes/__init__.py
"""
Route table: every (method, path) the application answers, and its handler
"""

from flask import Flask

from routes import address, emails, welcome

ROUTES = (
    ('GET', '/', 'root', welcome.show),
    ('GET', '/welcome', 'welcome', welcome.show),
    ('GET', '/healthcheck', 'healthcheck', welcome.healthcheck),
    ('GET', '/address', 'address', address.show),
    ('POST', '/address', 'address_search', address.create),
    ('GET', '/email', 'email', emails.show),
    ('POST', '/email', 'email_send', emails.create),
)


def register_routes(app: Flask) -> None:
    for method, rule, endpoint, view_func in ROUTES:
        app.add_url_rule(rule, endpoint, view_func, methods=[method])

    app.logger.info(f"Registered {len(ROUTES)} routes")
