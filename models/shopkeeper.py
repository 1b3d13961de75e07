# --- models/shopkeeper.py ---
from models import db, BIGINT
from datetime import datetime


class Shopkeeper(db.Model):
    __tablename__ = "shopkeeper"

    id = db.Column(BIGINT, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    # Profile
    name = db.Column(db.String(100), nullable=False)
    shop_name = db.Column(db.String(100), nullable=True)
    location = db.Column(db.String(150), nullable=True)
    city = db.Column(db.String(100), nullable=True)
    phone = db.Column(db.String(15), nullable=True)
    gst_number = db.Column(db.String(20), nullable=True)
    established_year = db.Column(db.Integer, nullable=True)
    is_verified = db.Column(db.Boolean, default=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    items = db.relationship(
        "Item", backref="shopkeeper", lazy=True, order_by="Item.id"
    )
    orders = db.relationship(
        "Order",
        backref="shopkeeper",
        lazy=True,
        cascade="all, delete-orphan",
        order_by="Order.id.desc()",
    )

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "shop_name": self.shop_name,
            "location": self.location,
            "city": self.city,
            "phone": self.phone,
            "gst_number": self.gst_number,
            "established_year": self.established_year,
            "is_verified": bool(self.is_verified),
        }

    def __repr__(self):
        return f"<Shopkeeper id={self.id} email={self.email}>"


class ShopkeeperSession(db.Model):
    """Server-side session row; the id travels in the session cookie."""

    __tablename__ = "shopkeeper_session"

    id = db.Column(db.String(64), primary_key=True)
    shopkeeper_id = db.Column(BIGINT, db.ForeignKey("shopkeeper.id"), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    expires_at = db.Column(db.DateTime, nullable=False)
    user_agent = db.Column(db.String(300), nullable=True)

    shopkeeper = db.relationship("Shopkeeper")

    def is_expired(self, now=None) -> bool:
        return (now or datetime.utcnow()) >= self.expires_at
