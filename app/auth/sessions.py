import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional
from flask import current_app, request
from models import db
from models.shopkeeper import ShopkeeperSession

logger = logging.getLogger(__name__)


def _cookie_name() -> str:
    return current_app.config["SESSION_ID_COOKIE"]


def _lifetime() -> timedelta:
    return timedelta(days=current_app.config["SESSION_LIFETIME_DAYS"])


def open_session(shopkeeper_id: int) -> ShopkeeperSession:
    """Create a session row for the shopkeeper. Caller commits."""
    now = datetime.utcnow()
    record = ShopkeeperSession(
        id=secrets.token_hex(32),
        shopkeeper_id=shopkeeper_id,
        created_at=now,
        expires_at=now + _lifetime(),
        user_agent=request.headers.get("User-Agent", "")[:300],
    )
    db.session.add(record)
    return record


def resolve_session() -> Optional[ShopkeeperSession]:
    """Return the live session named by the request cookie, if any."""
    sid = request.cookies.get(_cookie_name())
    if not sid:
        return None
    record = db.session.get(ShopkeeperSession, sid)
    if record is None:
        return None
    if record.is_expired():
        logger.info("Discarding expired session for shopkeeper %s", record.shopkeeper_id)
        db.session.delete(record)
        db.session.commit()
        return None
    return record


def close_session() -> bool:
    sid = request.cookies.get(_cookie_name())
    if not sid:
        return False
    record = db.session.get(ShopkeeperSession, sid)
    if record is None:
        return False
    db.session.delete(record)
    return True


def purge_expired_sessions(now=None) -> int:
    now = now or datetime.utcnow()
    return ShopkeeperSession.query.filter(
        ShopkeeperSession.expires_at <= now
    ).delete(synchronize_session=False)


def attach_session_cookie(resp, record: ShopkeeperSession):
    resp.set_cookie(
        _cookie_name(),
        record.id,
        max_age=int(_lifetime().total_seconds()),
        httponly=True,
        samesite="Lax",
        secure=current_app.config.get("SESSION_COOKIE_SECURE", False),
    )
    return resp


def clear_session_cookie(resp):
    resp.delete_cookie(_cookie_name(), httponly=True, samesite="Lax")
    return resp
