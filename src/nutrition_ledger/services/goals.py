"""Current macro goals."""

import logging
from dataclasses import dataclass, field

from nutrition_ledger.domain.models import MacroGoals
from nutrition_ledger.services.notifier import ChangeNotifier

_logger = logging.getLogger(__name__)


@dataclass
class GoalStore:
    """Holds the user's current daily macro goals."""

    notifier: ChangeNotifier
    goals: MacroGoals = field(default_factory=MacroGoals)

    def get(self) -> MacroGoals:
        """Return the current goals."""
        return self.goals

    def set(self, goals: MacroGoals) -> None:
        """Replace the goals wholesale."""
        self.goals = goals
        _logger.info("Macro goals updated")
        self.notifier.emit("goals", "updated")
