from functools import wraps

from flask import current_app, g, request


def login_required(view):
    """Verifies the bearer token and exposes the caller as g.identity."""
    @wraps(view)
    def wrapped(*args, **kwargs):
        g.identity = current_app.auth_service.authenticate(request.headers.get('Authorization'))
        return view(*args, **kwargs)
    return wrapped


def admin_required(view):
    """Bearer token plus the admin role on the caller's customer record."""
    @wraps(view)
    def wrapped(*args, **kwargs):
        g.identity = current_app.auth_service.authenticate(request.headers.get('Authorization'))
        g.admin = current_app.auth_service.require_admin(g.identity)
        return view(*args, **kwargs)
    return wrapped
