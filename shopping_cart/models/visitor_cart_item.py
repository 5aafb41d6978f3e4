from sqlalchemy import Column, Integer, String
from .base import Base


class VisitorCartItem(Base):
    """Cart line owned by an anonymous visitor session."""
    __tablename__ = "visitor_shopping_cart"

    id = Column(Integer, primary_key=True, autoincrement=True)
    visitor_id = Column(String(128), nullable=False, index=True)
    product_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    suffix = Column(String(64), nullable=True)  # variant code, e.g. SKU suffix

    def to_dict(self):
        return {
            "id": self.id,
            "visitor_id": self.visitor_id,
            "product_id": self.product_id,
            "quantity": self.quantity,
            "suffix": self.suffix,
        }
