"""Errors raised by ledger operations."""

from uuid import UUID


class LedgerError(Exception):
    """Base class for recoverable ledger errors."""


class NotFoundError(LedgerError):
    """Raised when an id does not reference a stored entity."""

    def __init__(self, kind: str, entity_id: UUID) -> None:
        super().__init__(f"{kind} {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id


class InvalidAmountError(LedgerError):
    """Raised when an ingredient amount is not positive."""

    def __init__(self, amount: float) -> None:
        super().__init__(f"amount must be positive, got {amount}")
        self.amount = amount


class InvalidPortionError(LedgerError):
    """Raised when a portion size or serving multiplier is not positive."""

    def __init__(self, portion_size: float) -> None:
        super().__init__(f"portion size must be positive, got {portion_size}")
        self.portion_size = portion_size


class IndexOutOfRangeError(LedgerError):
    """Raised when an ingredient index does not exist in a food."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"ingredient index {index} out of range for {size} items")
        self.index = index
        self.size = size


class DuplicateIdError(LedgerError):
    """Raised when adding an entity whose id is already stored."""

    def __init__(self, kind: str, entity_id: UUID) -> None:
        super().__init__(f"{kind} {entity_id} already exists")
        self.kind = kind
        self.entity_id = entity_id
