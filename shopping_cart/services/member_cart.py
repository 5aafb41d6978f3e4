from typing import Any, Dict, List, Optional

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError

from ..models.identity import VisitorIdentity, resolve_identity
from ..models.member_cart_item import MemberCartItem
from ..utils.predicates import CartPredicate
from .base import CartStoreBase
from .logging import log_event


class MemberCartStore(CartStoreBase):
    """CRUD on member_shopping_cart, scoped by site and by member or visitor identity.

    A non-zero member_id selects the member's rows and ignores visitor_id;
    member_id 0 selects the visitor's rows.
    """

    store_name = "member_cart"

    def _line(
        self,
        site_id: int,
        visitor_id: Optional[str],
        member_id: int,
        product_id: int,
        suffix: Optional[str],
        main_spec: Any = None,
        sub_spec: Any = None,
    ) -> CartPredicate:
        return (
            CartPredicate(MemberCartItem)
            .where("site_id", site_id)
            .owned_by(resolve_identity(visitor_id, member_id))
            .where("product_id", product_id)
            .where("suffix", suffix)
            .where_present("main_spec_id", main_spec)
            .where_present("sub_spec_id", sub_spec)
        )

    def add_item(
        self,
        site_id: int,
        visitor_id: Optional[str],
        member_id: int,
        product_id: int,
        suffix: Optional[str],
        quantity: int = 1,
        main_spec: Optional[int] = None,
        sub_spec: Optional[int] = None,
    ) -> bool:
        """Insert a cart line unconditionally; call find_item first to avoid duplicates."""
        try:
            self._session.execute(
                insert(MemberCartItem).values(
                    site_id=site_id,
                    visitor_id=visitor_id,
                    member_id=member_id or 0,
                    product_id=product_id,
                    suffix=suffix,
                    quantity=quantity,
                    main_spec_id=main_spec,
                    sub_spec_id=sub_spec,
                )
            )
        except SQLAlchemyError as exc:
            return self._fault("add_item", exc, False)
        log_event(
            "debug",
            "cart.item_added",
            store=self.store_name,
            site_id=site_id,
            member_id=member_id or 0,
            product_id=product_id,
        )
        return True

    def find_item(
        self,
        site_id: int,
        visitor_id: Optional[str],
        member_id: int,
        product_id: int,
        suffix: Optional[str],
        main_spec: Optional[int] = None,
        sub_spec: Optional[int] = None,
    ) -> List[Dict]:
        pred = self._line(site_id, visitor_id, member_id, product_id, suffix, main_spec, sub_spec)
        return self._select("find_item", pred)

    def list_items(self, site_id: int, visitor_id: Optional[str], member_id: int = 0) -> List[Dict]:
        pred = CartPredicate(MemberCartItem).where("site_id", site_id).owned_by(
            resolve_identity(visitor_id, member_id)
        )
        return self._select("list_items", pred)

    def remove_item(
        self,
        site_id: int,
        visitor_id: Optional[str],
        member_id: int,
        product_id: int,
        suffix: Optional[str],
        main_spec: Optional[int] = None,
        sub_spec: Optional[int] = None,
    ) -> bool:
        pred = self._line(site_id, visitor_id, member_id, product_id, suffix, main_spec, sub_spec)
        return self._delete("remove_item", pred)

    def remove_item_by_id(self, item_id: int) -> bool:
        return self._delete("remove_item_by_id", CartPredicate(MemberCartItem).where("id", item_id))

    def clear_cart(self, member_id: int) -> bool:
        """Delete every row of the member across all sites."""
        return self._delete("clear_cart", CartPredicate(MemberCartItem).where("member_id", member_id))

    def update_quantity(
        self,
        site_id: int,
        visitor_id: Optional[str],
        member_id: int,
        product_id: int,
        suffix: Optional[str],
        quantity: int,
        main_spec: Optional[int] = None,
        sub_spec: Optional[int] = None,
    ) -> bool:
        pred = self._line(site_id, visitor_id, member_id, product_id, suffix, main_spec, sub_spec)
        return self._update("update_quantity", pred, {MemberCartItem.quantity: quantity})

    def move_cart(self, site_id: int, visitor_id: str, member_id: int, quantity: Optional[int] = None) -> bool:
        """Attribute the visitor's rows on this site to the member after login.

        With a quantity, every moved row gets that quantity; without one the
        rows keep their own quantities.
        """
        pred = CartPredicate(MemberCartItem).where("site_id", site_id).owned_by(VisitorIdentity(visitor_id))
        values = {MemberCartItem.member_id: member_id}
        if quantity is not None:
            values[MemberCartItem.quantity] = quantity
        return self._update("move_cart", pred, values)

    def _select(self, operation: str, pred: CartPredicate) -> List[Dict]:
        try:
            return [it.to_dict() for it in pred.apply(self._session.query(MemberCartItem)).all()]
        except SQLAlchemyError as exc:
            return self._fault(operation, exc, [])

    def _update(self, operation: str, pred: CartPredicate, values: Dict) -> bool:
        try:
            count = pred.apply(self._session.query(MemberCartItem)).update(values, synchronize_session="evaluate")
        except SQLAlchemyError as exc:
            return self._fault(operation, exc, False)
        log_event("debug", f"cart.{operation}", store=self.store_name, rows=count)
        return True

    def _delete(self, operation: str, pred: CartPredicate) -> bool:
        try:
            count = pred.apply(self._session.query(MemberCartItem)).delete(synchronize_session="evaluate")
        except SQLAlchemyError as exc:
            return self._fault(operation, exc, False)
        log_event("debug", f"cart.{operation}", store=self.store_name, rows=count)
        return True
