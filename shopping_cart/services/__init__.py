"""Cart stores over visitor_shopping_cart and member_shopping_cart."""

from .member_cart import MemberCartStore
from .visitor_cart import VisitorCartStore

__all__ = [
    "MemberCartStore",
    "VisitorCartStore",
]
