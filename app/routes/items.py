from flask import Blueprint, request
from pydantic import ValidationError
from app.services.items import (
    create_item,
    update_item,
    delete_item,
    get_item,
    get_owned_item,
    ItemNotFound,
    ItemValidationError,
)
from app.services.storage import ImageStorageError
from app.utils import (
    ok,
    error,
    transactional,
    internal_error_response,
    validation_error_response,
    login_required,
    current_shopkeeper,
    request_data,
)

item_bp = Blueprint("items", __name__)


def _own_items(shopkeeper):
    return [i.to_dict() for i in shopkeeper.items]


@item_bp.route("/addlist", methods=["GET"])
@login_required
def add_item_form():
    return ok({"items": _own_items(current_shopkeeper())})


@item_bp.route("/main", methods=["POST"])
@login_required
def add_item():
    shopkeeper = current_shopkeeper()
    try:
        with transactional("Failed to add item"):
            item = create_item(shopkeeper, request_data(), request.files.get("image"))
    except (ItemValidationError, ImageStorageError) as e:
        return error(str(e), status=400, redirect="/addlist")
    except ValidationError as ve:
        return validation_error_response(ve.errors(), redirect="/addlist")
    except Exception:
        return internal_error_response(redirect="/addlist")
    return ok(item.to_dict(), message="Item added successfully!", redirect="/main")


@item_bp.route("/main/show/<int:item_id>", methods=["GET"])
@login_required
def show_item(item_id):
    try:
        details = get_item(item_id)
    except ItemNotFound as e:
        return error(str(e), status=404, redirect="/main")
    return ok({"details": details.to_dict(), "items": _own_items(current_shopkeeper())})


@item_bp.route("/main/show/<int:item_id>", methods=["POST"])
@login_required
def edit_item(item_id):
    shopkeeper = current_shopkeeper()
    try:
        with transactional("Failed to update item"):
            details = update_item(
                shopkeeper, item_id, request_data(), request.files.get("image")
            )
    except ItemNotFound as e:
        return error(str(e), status=404, redirect="/main")
    except (ItemValidationError, ImageStorageError) as e:
        return error(str(e), status=400, redirect=f"/main/edit/{item_id}")
    except ValidationError as ve:
        return validation_error_response(ve.errors(), redirect=f"/main/edit/{item_id}")
    except Exception:
        return internal_error_response(redirect=f"/main/edit/{item_id}")
    return ok(
        {"details": details.to_dict(), "items": _own_items(shopkeeper)},
        message="Item updated successfully!",
    )


@item_bp.route("/main/edit/<int:item_id>", methods=["GET"])
@login_required
def edit_item_form(item_id):
    try:
        details = get_owned_item(current_shopkeeper(), item_id)
    except ItemNotFound as e:
        return error(str(e), status=404, redirect="/main")
    return ok({"details": details.to_dict()})


@item_bp.route("/main/<int:item_id>", methods=["DELETE"])
@login_required
def remove_item(item_id):
    try:
        with transactional("Failed to delete item"):
            delete_item(current_shopkeeper(), item_id)
    except ItemNotFound as e:
        return error(str(e), status=404, redirect="/main")
    except Exception:
        return internal_error_response(redirect="/main")
    return ok(message="Item deleted successfully!", redirect="/main")
