from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey
from sqlalchemy.sql import func
from models import db, BIGINT


class Order(db.Model):
    """Purchase snapshot taken at order time.

    ``title``, ``image`` and ``price`` are copied from the item when the
    order is placed and never follow later item edits.
    """

    __tablename__ = "order"
    __table_args__ = (
        db.Index("ix_order_shopkeeper_created", "shopkeeper_id", "created_at"),
    )

    id = Column(BIGINT, primary_key=True)
    shopkeeper_id = Column(BIGINT, ForeignKey("shopkeeper.id"), nullable=False)
    item_id = Column(BIGINT, ForeignKey("item.id"), nullable=True)
    quantity = Column(Integer, nullable=False)

    # Snapshot
    title = Column(String(100), nullable=False)
    image = Column(String(255), nullable=True)
    price = Column(Float, nullable=False)

    created_at = Column(DateTime, default=func.now())

    @property
    def amount(self) -> float:
        return float(self.price) * int(self.quantity)

    def to_dict(self):
        return {
            "id": self.id,
            "item_id": self.item_id,
            "quantity": self.quantity,
            "title": self.title,
            "image": self.image,
            "price": self.price,
            "amount": self.amount,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
