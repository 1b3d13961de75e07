from models import db
from app.errors import DomainError
from models.order import Order
from app.schemas.order import BuyItemRequest
from app.services.items import get_item


class OrderNotFound(DomainError):
    pass


def place_order(shopkeeper, item_id, raw: dict) -> Order:
    """Snapshot the item into a new order for ``shopkeeper``.

    Stock is neither checked nor decremented.
    """
    fields = BuyItemRequest(**raw)
    item = get_item(item_id)
    order = Order(
        shopkeeper_id=shopkeeper.id,
        item_id=item.id,
        quantity=fields.quantity,
        title=item.name,
        image=item.image,
        price=item.selling_price,
    )
    db.session.add(order)
    return order


def list_orders(shopkeeper):
    return (
        Order.query.filter_by(shopkeeper_id=shopkeeper.id)
        .order_by(Order.id.desc())
        .all()
    )


def delete_order(shopkeeper, order_id) -> Order:
    order = db.session.get(Order, order_id)
    if order is None or order.shopkeeper_id != shopkeeper.id:
        raise OrderNotFound("Order not found")
    db.session.delete(order)
    return order
