import logging
from flask import Blueprint, current_app, request, g
from flask_limiter.util import get_remote_address
from extensions import limiter
from models import db
from app.auth import (
    AuthError,
    open_session,
    close_session,
    attach_session_cookie,
    clear_session_cookie,
)
from app.metrics import SIGNUPS, LOGINS
from app.schemas.auth import SignupRequest, LoginRequest
from app.services.shopkeepers import (
    register_shopkeeper,
    DuplicateEmailError,
    ShopkeeperValidationError,
)
from app.utils import (
    ok,
    error,
    transactional,
    internal_error_response,
    redirect_if_logged_in,
    validate_schema,
)

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/", methods=["GET"])
@redirect_if_logged_in
def login_page():
    return ok({"page": "login"})


@auth_bp.route("/signup", methods=["GET"])
@redirect_if_logged_in
def signup_page():
    return ok({"page": "signup"})


@auth_bp.route("/signup", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["SIGNUP_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Too many signups from this IP",
)
@validate_schema(SignupRequest, redirect="/signup")
def signup():
    data: SignupRequest = request.validated_data
    try:
        with transactional("Failed to register shopkeeper"):
            shopkeeper = register_shopkeeper(data)
            record = open_session(shopkeeper.id)
    except DuplicateEmailError as e:
        db.session.rollback()
        SIGNUPS.labels("duplicate").inc()
        return error(str(e), status=409, redirect="/")
    except ShopkeeperValidationError as e:
        db.session.rollback()
        return error(str(e), status=400, redirect="/signup")
    except Exception:
        return internal_error_response(redirect="/signup")

    SIGNUPS.labels("created").inc()
    logger.info("Shopkeeper %s registered", shopkeeper.id)
    resp, status = ok(
        {"shopkeeper": shopkeeper.to_dict()},
        message=f"Welcome, {shopkeeper.name}!",
        status=201,
        redirect="/main",
    )
    return attach_session_cookie(resp, record), status


@auth_bp.route("/login", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["LOGIN_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Too many logins from this IP",
)
@validate_schema(LoginRequest, redirect="/")
def login():
    data: LoginRequest = request.validated_data
    try:
        identity = current_app.authenticator.verify(data.model_dump())
    except AuthError as e:
        LOGINS.labels("failed").inc()
        logger.warning("Login failed: %s", e)
        return error(str(e), status=401, redirect="/")

    try:
        with transactional("Failed to open session"):
            record = open_session(identity.shopkeeper_id)
    except Exception:
        return internal_error_response(redirect="/")

    LOGINS.labels("success").inc()
    resp, status = ok(
        {"shopkeeper_id": identity.shopkeeper_id},
        message=f"Welcome back, {identity.name}!",
        redirect="/main",
    )
    return attach_session_cookie(resp, record), status


@auth_bp.route("/logout", methods=["GET"])
def logout():
    try:
        with transactional("Failed to close session"):
            closed = close_session()
    except Exception:
        return internal_error_response(redirect="/")
    g.pop("shopkeeper", None)
    if closed:
        logger.info("Session closed")
    resp, status = ok(message="Logged out successfully!", redirect="/")
    return clear_session_cookie(resp), status
