"""Change events published after ledger mutations."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class ChangeEvent:
    """A successful mutation of one ledger collection."""

    collection: str
    action: str
    entity_id: UUID | None = None
