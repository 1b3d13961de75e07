from flask import current_app
from app.errors import DomainError
from models import db
from models.item import Item
from app.schemas.item import AddItemRequest, UpdateItemRequest
from app.utils.validation import has_required_fields, is_blank

REQUIRED_ITEM_FIELDS = ("name", "cost_price", "selling_price")
NUMERIC_ITEM_FIELDS = ("discount", "stock", "min_stock_alert")
MISSING_FIELDS_MESSAGE = "Name, cost price and selling price are required!"


class ItemNotFound(DomainError):
    pass


class ItemValidationError(DomainError):
    pass


def get_item(item_id) -> Item:
    item = db.session.get(Item, item_id)
    if item is None:
        raise ItemNotFound("Item not found!")
    return item


def get_owned_item(shopkeeper, item_id) -> Item:
    item = db.session.get(Item, item_id)
    if item is None or item.shopkeeper_id != shopkeeper.id:
        raise ItemNotFound("Item not found!")
    return item


def _store_image(image_file):
    if image_file is None or not image_file.filename:
        return None
    return current_app.image_storage.save(image_file)


def create_item(shopkeeper, raw: dict, image_file=None) -> Item:
    """Build a new item owned by ``shopkeeper``.

    Raises ``ItemValidationError`` for missing required fields and lets
    pydantic's ``ValidationError`` through for malformed values.
    """
    if not has_required_fields(raw, REQUIRED_ITEM_FIELDS):
        raise ItemValidationError(MISSING_FIELDS_MESSAGE)
    # Blank optional form fields fall back to their defaults
    cleaned = {k: v for k, v in raw.items() if not is_blank(v)}
    fields = AddItemRequest(**cleaned)
    image = _store_image(image_file)
    item = Item(
        shopkeeper_id=shopkeeper.id,
        name=fields.name,
        brand=fields.brand,
        category=fields.category,
        sub_category=fields.sub_category,
        cost_price=fields.cost_price,
        selling_price=fields.selling_price,
        discount=fields.discount,
        stock=fields.stock,
        min_stock_alert=fields.min_stock_alert,
        unit=fields.unit,
        image=image or fields.image,
        description=fields.description,
    )
    db.session.add(item)
    return item


def update_item(shopkeeper, item_id, raw: dict, image_file=None) -> Item:
    """Apply the fields present in ``raw``; absent fields keep their value.

    Text fields sent blank are cleared. Blank optional numbers count as
    absent, so a full edit form can leave them empty.
    """
    item = get_owned_item(shopkeeper, item_id)
    blanked = [f for f in REQUIRED_ITEM_FIELDS if f in raw and is_blank(raw[f])]
    if blanked:
        raise ItemValidationError(f"{', '.join(blanked)} cannot be empty")
    raw = {
        k: v for k, v in raw.items()
        if not (k in NUMERIC_ITEM_FIELDS and is_blank(v))
    }
    fields = UpdateItemRequest(**raw)
    for key, value in fields.model_dump(exclude_unset=True).items():
        setattr(item, key, value)
    image = _store_image(image_file)
    if image:
        item.image = image
    return item


def delete_item(shopkeeper, item_id) -> Item:
    item = get_owned_item(shopkeeper, item_id)
    db.session.delete(item)
    return item
