from flask import Blueprint, current_app, request
from app.services.categories import category_view
from app.utils import ok, login_required, current_shopkeeper

dashboard_bp = Blueprint("dashboard", __name__)


@dashboard_bp.route("/main", methods=["GET"])
@login_required
def main():
    """Shopkeeper home: profile, items (optionally filtered by ``q``) and categories."""
    return ok(category_view(current_shopkeeper(), request.args.get("q")))


@dashboard_bp.route("/main/dashboard", methods=["GET"])
@login_required
def analytics():
    shopkeeper = current_shopkeeper()
    return ok(current_app.metrics_source.snapshot(shopkeeper))
