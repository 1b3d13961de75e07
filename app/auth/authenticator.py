"""
Credential verification.

The application holds one ``Authenticator`` on ``app.authenticator``; the
login route hands it the submitted credentials and gets back an
``Identity`` or an ``AuthError``.
"""
from dataclasses import dataclass
from typing import Mapping
from werkzeug.security import check_password_hash, generate_password_hash
from models.shopkeeper import Shopkeeper

INVALID_CREDENTIALS = "Password or username is incorrect"


class AuthError(Exception):
    pass


@dataclass(frozen=True)
class Identity:
    shopkeeper_id: int
    email: str
    name: str


class Authenticator:
    def verify(self, credentials: Mapping[str, str]) -> Identity:
        raise NotImplementedError


def normalize_email(email) -> str:
    return (email or "").strip().lower()


def hash_password(password: str) -> str:
    return generate_password_hash(password)


class PasswordAuthenticator(Authenticator):
    """Email + password against the stored werkzeug hash."""

    def verify(self, credentials: Mapping[str, str]) -> Identity:
        email = normalize_email(credentials.get("email"))
        password = credentials.get("password") or ""
        if not email or not password:
            raise AuthError("Missing credentials")
        shopkeeper = Shopkeeper.query.filter_by(email=email).first()
        if not shopkeeper or not check_password_hash(shopkeeper.password_hash, password):
            raise AuthError(INVALID_CREDENTIALS)
        return Identity(
            shopkeeper_id=shopkeeper.id,
            email=shopkeeper.email,
            name=shopkeeper.name,
        )
