"""Shopping-cart data access for visitor and member carts."""

from .exceptions import StorageFault
from .models import MemberIdentity, VisitorIdentity, resolve_identity
from .services import MemberCartStore, VisitorCartStore

__all__ = [
    "MemberCartStore",
    "VisitorCartStore",
    "StorageFault",
    "MemberIdentity",
    "VisitorIdentity",
    "resolve_identity",
]
