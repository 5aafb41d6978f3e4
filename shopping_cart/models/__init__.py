from .base import Base
from .identity import Identity, MemberIdentity, VisitorIdentity, resolve_identity
from .member_cart_item import MemberCartItem
from .visitor_cart_item import VisitorCartItem

__all__ = [
    "Base",
    "Identity",
    "MemberIdentity",
    "VisitorIdentity",
    "resolve_identity",
    "MemberCartItem",
    "VisitorCartItem",
]
