# --- models/item.py ---
from models import db, BIGINT
from datetime import datetime


class Item(db.Model):
    __tablename__ = "item"

    id = db.Column(BIGINT, primary_key=True)
    shopkeeper_id = db.Column(BIGINT, db.ForeignKey("shopkeeper.id"), nullable=False, index=True)

    # Product details
    name = db.Column(db.String(100), nullable=False)
    brand = db.Column(db.String(50), nullable=True)
    description = db.Column(db.Text, default="")

    # Category & type
    category = db.Column(db.String(50), nullable=True)
    sub_category = db.Column(db.String(50), default="")

    # Pricing
    cost_price = db.Column(db.Float, nullable=False)              # vendor's purchase cost
    selling_price = db.Column(db.Float, nullable=False)           # price sold to customers
    discount = db.Column(db.Float, default=0)                     # percent

    # Stock & inventory
    stock = db.Column(db.Integer, default=0)
    min_stock_alert = db.Column(db.Integer, default=5)
    unit = db.Column(db.String(20), default="pcs")                # pcs, kg, litre

    # Media
    image = db.Column(db.String(255), default="")

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Orders keep their snapshot; the reference is nulled when the item goes
    orders = db.relationship("Order", backref="item", lazy=True)

    @property
    def low_stock(self) -> bool:
        return (self.stock or 0) <= (self.min_stock_alert or 0)

    def to_dict(self):
        return {
            "id": self.id,
            "shopkeeper_id": self.shopkeeper_id,
            "name": self.name,
            "brand": self.brand,
            "description": self.description,
            "category": self.category,
            "sub_category": self.sub_category,
            "cost_price": self.cost_price,
            "selling_price": self.selling_price,
            "discount": self.discount,
            "stock": self.stock,
            "min_stock_alert": self.min_stock_alert,
            "unit": self.unit,
            "image": self.image,
            "low_stock": self.low_stock,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
