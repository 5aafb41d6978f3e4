from typing import Dict, List, Optional

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError

from ..models.visitor_cart_item import VisitorCartItem
from ..utils.predicates import CartPredicate
from .base import CartStoreBase
from .logging import log_event


class VisitorCartStore(CartStoreBase):
    """CRUD on visitor_shopping_cart, scoped by visitor id."""

    store_name = "visitor_cart"

    def add_item(self, visitor_id: str, product_id: int, quantity: int = 1, suffix: Optional[str] = None) -> bool:
        """Insert a cart line. No existence check: duplicates are the caller's concern."""
        try:
            self._session.execute(
                insert(VisitorCartItem).values(
                    visitor_id=visitor_id,
                    product_id=product_id,
                    quantity=quantity,
                    suffix=suffix,
                )
            )
        except SQLAlchemyError as exc:
            return self._fault("add_item", exc, False)
        log_event("debug", "cart.item_added", store=self.store_name, visitor_id=visitor_id, product_id=product_id)
        return True

    def list_items(self, visitor_id: str) -> List[Dict]:
        try:
            q = CartPredicate(VisitorCartItem).where("visitor_id", visitor_id).apply(
                self._session.query(VisitorCartItem)
            )
            return [it.to_dict() for it in q.all()]
        except SQLAlchemyError as exc:
            return self._fault("list_items", exc, [])

    def remove_item(self, visitor_id: str, product_id: int, suffix: Optional[str] = None) -> bool:
        """Delete the product's lines; a suffix narrows the delete to that variant."""
        pred = (
            CartPredicate(VisitorCartItem)
            .where("visitor_id", visitor_id)
            .where("product_id", product_id)
        )
        if suffix is not None:
            pred.where("suffix", suffix)
        return self._delete("remove_item", pred)

    def clear_cart(self, visitor_id: str) -> bool:
        return self._delete("clear_cart", CartPredicate(VisitorCartItem).where("visitor_id", visitor_id))

    def update_quantity(self, visitor_id: str, product_id: int, suffix: Optional[str], quantity: int) -> bool:
        pred = (
            CartPredicate(VisitorCartItem)
            .where("visitor_id", visitor_id)
            .where("product_id", product_id)
            .where("suffix", suffix)
        )
        try:
            count = pred.apply(self._session.query(VisitorCartItem)).update(
                {VisitorCartItem.quantity: quantity}, synchronize_session="evaluate"
            )
        except SQLAlchemyError as exc:
            return self._fault("update_quantity", exc, False)
        log_event("debug", "cart.quantity_updated", store=self.store_name, visitor_id=visitor_id, rows=count)
        return True

    def _delete(self, operation: str, pred: CartPredicate) -> bool:
        try:
            count = pred.apply(self._session.query(VisitorCartItem)).delete(synchronize_session="evaluate")
        except SQLAlchemyError as exc:
            return self._fault(operation, exc, False)
        log_event("debug", f"cart.{operation}", store=self.store_name, rows=count)
        return True
