"""Store exceptions.

Mapped to HTTP responses by the exception handlers in ``main``:
NotFoundError → 404, InvalidQuantityError → 422, ConflictError → 409.
"""


class StoreError(Exception):
    """Base class for store operation failures."""
    pass


class NotFoundError(StoreError):
    """Raised when a referenced record does not exist."""

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} not found")


class ConflictError(StoreError):
    """Raised when an operation conflicts with the current state of a record."""
    pass


class InsufficientStockError(ConflictError):
    """Raised when more units are posted as surplus than the item holds."""
    pass


class InvalidQuantityError(StoreError):
    """Raised for zero or negative quantities."""
    pass
