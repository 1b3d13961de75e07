from sqlalchemy.exc import IntegrityError
from models import db
from app.errors import DomainError
from models.shopkeeper import Shopkeeper
from app.auth.authenticator import normalize_email, hash_password

DUPLICATE_EMAIL_MESSAGE = "Email already exists. Please log in."


class ShopkeeperValidationError(DomainError):
    pass


class DuplicateEmailError(ShopkeeperValidationError):
    pass


def email_taken(email) -> bool:
    return Shopkeeper.query.filter_by(email=email).first() is not None


def register_shopkeeper(data) -> Shopkeeper:
    """Create a shopkeeper account from a validated signup payload."""
    email = normalize_email(data.email)
    if not email or not data.password or not (data.name or "").strip():
        raise ShopkeeperValidationError("Email, password and name are required")
    if email_taken(email):
        raise DuplicateEmailError(DUPLICATE_EMAIL_MESSAGE)
    shopkeeper = Shopkeeper(
        email=email,
        password_hash=hash_password(data.password),
        name=data.name.strip(),
        shop_name=data.shop_name,
        location=data.location,
        city=data.city,
        phone=data.phone,
    )
    db.session.add(shopkeeper)
    try:
        db.session.flush()
    except IntegrityError:
        # A concurrent signup claimed the email after the check above
        db.session.rollback()
        raise DuplicateEmailError(DUPLICATE_EMAIL_MESSAGE)
    return shopkeeper
