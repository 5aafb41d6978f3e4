"""Cart storage errors."""


class StorageFault(Exception):
    """A cart statement failed in the storage layer.

    Covers connectivity loss, malformed statements and constraint violations.
    The underlying SQLAlchemy error is chained as ``__cause__``.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")
