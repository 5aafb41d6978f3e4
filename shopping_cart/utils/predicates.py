from typing import Any, List, Tuple

from ..models.identity import Identity


def is_present(value: Any) -> bool:
    """Optional spec filters apply only when given and not an empty string."""
    return value is not None and value != ""


class CartPredicate:
    """Accumulates (column, value) equality clauses for one cart model.

    Each clause is stored together with its bound value, so the WHERE text and
    the parameters cannot drift apart.
    """

    def __init__(self, model) -> None:
        self._model = model
        self._clauses: List[Tuple[str, Any]] = []

    def where(self, column: str, value: Any) -> "CartPredicate":
        # raises AttributeError for a column the model does not have
        getattr(self._model, column)
        self._clauses.append((column, value))
        return self

    def where_present(self, column: str, value: Any) -> "CartPredicate":
        if is_present(value):
            self.where(column, value)
        return self

    def owned_by(self, identity: Identity) -> "CartPredicate":
        column, value = identity.column_filter()
        return self.where(column, value)

    @property
    def clauses(self) -> List[Tuple[str, Any]]:
        return list(self._clauses)

    def criteria(self) -> list:
        return [getattr(self._model, column) == value for column, value in self._clauses]

    def apply(self, query):
        return query.filter(*self.criteria())
