from .authenticator import Authenticator, PasswordAuthenticator, Identity, AuthError
from .sessions import (
    open_session,
    resolve_session,
    close_session,
    purge_expired_sessions,
    attach_session_cookie,
    clear_session_cookie,
)

__all__ = [
    'Authenticator',
    'PasswordAuthenticator',
    'Identity',
    'AuthError',
    'open_session',
    'resolve_session',
    'close_session',
    'purge_expired_sessions',
    'attach_session_cookie',
    'clear_session_cookie',
]
