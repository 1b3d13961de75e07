from flask import Blueprint, request
from app.services.categories import category_view
from app.services.items import delete_item, ItemNotFound
from app.utils import (
    ok,
    error,
    transactional,
    internal_error_response,
    login_required,
    current_shopkeeper,
)

category_bp = Blueprint("categories", __name__)


@category_bp.route("/main/categories", methods=["GET"])
@login_required
def show_categories():
    return ok(category_view(current_shopkeeper(), request.args.get("q")))


@category_bp.route("/main/categories/<int:item_id>", methods=["DELETE"])
@login_required
def delete_category_item(item_id):
    try:
        with transactional("Failed to delete item"):
            delete_item(current_shopkeeper(), item_id)
    except ItemNotFound as e:
        return error(str(e), status=404, redirect="/main/categories")
    except Exception:
        return internal_error_response(redirect="/main/categories")
    return ok(message="Item deleted successfully!", redirect="/main/categories")
