from functools import wraps
from flask import g, redirect, url_for
from app.auth.sessions import resolve_session


def _load_identity():
    if "shopkeeper" not in g:
        record = resolve_session()
        g.session_record = record
        g.shopkeeper = record.shopkeeper if record else None
    return g.shopkeeper


def current_shopkeeper():
    return _load_identity()


def login_required(func):
    """Send unauthenticated callers to the login page."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        if _load_identity() is None:
            return redirect(url_for("auth.login_page"))
        return func(*args, **kwargs)

    return wrapper


def redirect_if_logged_in(func):
    """Send authenticated callers away from login/signup."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        if _load_identity() is not None:
            return redirect(url_for("dashboard.main"))
        return func(*args, **kwargs)

    return wrapper
