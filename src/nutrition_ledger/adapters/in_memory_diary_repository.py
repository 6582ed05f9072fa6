"""In-memory storage for diary entries."""

from dataclasses import dataclass, field
from uuid import UUID

from nutrition_ledger.domain.models import DiaryEntry
from nutrition_ledger.services.diary import DiaryRepository


@dataclass
class InMemoryDiaryRepository(DiaryRepository):
    """List-backed diary repository keeping entries in insertion order."""

    entries: list[DiaryEntry] = field(default_factory=list)

    def append(self, entry: DiaryEntry) -> None:
        """Append an entry."""
        self.entries.append(entry)

    def get(self, entry_id: UUID) -> DiaryEntry | None:
        """Return an entry by id, if present."""
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    def delete(self, entry_id: UUID) -> bool:
        """Delete an entry and report whether it existed."""
        for index, entry in enumerate(self.entries):
            if entry.id == entry_id:
                del self.entries[index]
                return True
        return False

    def list_all(self) -> list[DiaryEntry]:
        """Return all entries in insertion order."""
        return list(self.entries)

    def clear(self) -> None:
        """Remove every entry."""
        self.entries.clear()
