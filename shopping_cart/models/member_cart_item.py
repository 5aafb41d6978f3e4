from sqlalchemy import Column, Integer, String
from .base import Base


class MemberCartItem(Base):
    """Cart line scoped by site and by member or, before login, by visitor."""
    __tablename__ = "member_shopping_cart"

    id = Column(Integer, primary_key=True, autoincrement=True)
    site_id = Column(Integer, nullable=False, index=True)
    visitor_id = Column(String(128), nullable=True)
    member_id = Column(Integer, nullable=False, default=0)  # 0 = not attributed to a member
    product_id = Column(Integer, nullable=False)
    suffix = Column(String(64), nullable=True)
    quantity = Column(Integer, nullable=False, default=1)
    main_spec_id = Column(Integer, nullable=True)  # e.g. color
    sub_spec_id = Column(Integer, nullable=True)  # e.g. size

    def to_dict(self):
        return {
            "id": self.id,
            "site_id": self.site_id,
            "visitor_id": self.visitor_id,
            "member_id": self.member_id,
            "product_id": self.product_id,
            "suffix": self.suffix,
            "quantity": self.quantity,
            "main_spec_id": self.main_spec_id,
            "sub_spec_id": self.sub_spec_id,
        }
