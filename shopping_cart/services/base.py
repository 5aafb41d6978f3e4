from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import strict_errors_from_env
from ..exceptions import StorageFault
from .logging import log_event


class CartStoreBase:
    """Holds the caller's session and converts storage faults at the method boundary.

    Stores issue one statement per call and never commit or roll back; the
    transaction belongs to whoever opened the session.
    """

    store_name = "cart"

    def __init__(self, session: Session, *, strict: Optional[bool] = None):
        self._session = session
        self._strict = strict_errors_from_env() if strict is None else bool(strict)

    @property
    def strict(self) -> bool:
        return self._strict

    def _fault(self, operation: str, exc: SQLAlchemyError, fallback):
        log_event(
            "error",
            "cart.storage_fault",
            store=self.store_name,
            operation=operation,
            error=str(getattr(exc, "orig", None) or exc),
        )
        if self._strict:
            raise StorageFault(operation, str(exc)) from exc
        return fallback
