"""Change notification for ledger subscribers."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from uuid import UUID

from nutrition_ledger.domain.events import ChangeEvent

_logger = logging.getLogger(__name__)

Subscriber = Callable[[ChangeEvent], None]


@dataclass
class ChangeNotifier:
    """Delivers change events to subscribers in subscription order."""

    _subscribers: list[Subscriber] = field(default_factory=list)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback and return a function that removes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, event: ChangeEvent) -> None:
        """Deliver an event to every subscriber."""
        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception:
                _logger.exception(
                    "Change subscriber failed",
                    extra={"collection": event.collection, "action": event.action},
                )

    def emit(
        self, collection: str, action: str, entity_id: UUID | None = None
    ) -> None:
        """Build and publish a change event."""
        self.publish(
            ChangeEvent(collection=collection, action=action, entity_id=entity_id)
        )
