import logging
from flask import Blueprint
from pydantic import ValidationError
from app.metrics import ORDERS_PLACED
from app.services.items import get_item, ItemNotFound
from app.services.orders import place_order, list_orders, delete_order, OrderNotFound
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

logger = logging.getLogger(__name__)

order_bp = Blueprint("orders", __name__)


@order_bp.route("/main/order", methods=["GET"])
@login_required
def show_orders():
    orders = list_orders(current_shopkeeper())
    return ok({"orders": [o.to_dict() for o in orders]})


@order_bp.route("/main/order/<int:order_id>", methods=["DELETE"])
@login_required
def remove_order(order_id):
    try:
        with transactional("Failed to delete order"):
            delete_order(current_shopkeeper(), order_id)
    except OrderNotFound as e:
        return error(str(e), status=404, redirect="/main/order")
    except Exception:
        return internal_error_response(redirect="/main/order")
    return ok(message="Order deleted successfully!", redirect="/main/order")


@order_bp.route("/buyItem/<int:item_id>", methods=["GET"])
@login_required
def buy_item_form(item_id):
    try:
        ordered_item = get_item(item_id)
    except ItemNotFound:
        return error("Item not found", status=404, redirect="/main")
    return ok({"ordered_item": ordered_item.to_dict()})


@order_bp.route("/buyItem/<int:item_id>", methods=["POST"])
@login_required
def buy_item(item_id):
    shopkeeper = current_shopkeeper()
    try:
        with transactional("Failed to place order"):
            order = place_order(shopkeeper, item_id, request_data())
    except ItemNotFound:
        return error("Item not found", status=404, redirect="/main")
    except ValidationError as ve:
        return validation_error_response(ve.errors(), redirect=f"/buyItem/{item_id}")
    except Exception:
        return internal_error_response(redirect=f"/buyItem/{item_id}")

    ORDERS_PLACED.inc()
    logger.info("Order %s placed by shopkeeper %s", order.id, shopkeeper.id)
    return ok(
        order.to_dict(),
        message="Item purchased successfully!",
        redirect=f"/main/show/{item_id}",
    )
