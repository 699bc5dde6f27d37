"""Service for managing goals."""

from datetime import date, datetime, timezone
from typing import Any, Optional

from lifetracker.config import settings
from lifetracker.exceptions import InvalidInputError
from lifetracker.logging_setup import get_logger
from lifetracker.models import Goal
from lifetracker.services.collection_service import CollectionService
from lifetracker.services.persistence_service import PersistenceService

logger = get_logger(__name__)


class GoalService(CollectionService[Goal]):
    """Numeric goals with clamped progress."""

    model = Goal

    def __init__(
        self,
        persistence: Optional[PersistenceService] = None,
        key: Optional[str] = None,
    ):
        super().__init__(key or settings.goals_storage_key, persistence)

    def add(
        self,
        name: str,
        description: str = "",
        target: Any = 100,
        target_date: Any = "",
    ) -> Goal:
        """
        Create a goal with no progress.

        Raises:
            InvalidInputError: if the name is blank, the target is not a
                whole number of at least one, or the target date is invalid
        """
        name = (name or "").strip()
        if not name:
            raise InvalidInputError("Goal name is required")

        goal = Goal(
            id=self._next_id(),
            name=name,
            description=(description or "").strip(),
            target=self._parse_target(target),
            target_date=self._parse_target_date(target_date),
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        logger.info("Added goal %s: %s (target %d)", goal.id, goal.name, goal.target)
        return self._prepend(goal)

    def toggle(self, goal_id: str) -> Optional[Goal]:
        """
        Flip completion. Completing fills progress up to the target.

        Returns:
            The updated goal, or None if not found
        """
        goal = self.get(goal_id)
        if goal is None:
            return None

        completed = not goal.completed
        current = goal.target if completed else goal.current
        return self._update(goal_id, completed=completed, current=current)

    def update_progress(self, goal_id: str, delta: int) -> Optional[Goal]:
        """
        Move progress by ``delta``, clamped to [0, target].

        Returns:
            The updated goal, or None if not found
        """
        goal = self.get(goal_id)
        if goal is None:
            return None

        current = max(0, min(goal.current + delta, goal.target))
        return self._update(goal_id, current=current, completed=current >= goal.target)

    def stats(self) -> dict[str, int]:
        """
        Count goals.

        Returns dict with 'total', 'completed' and 'in_progress'
        """
        completed = sum(1 for g in self._records if g.completed)
        return {
            "total": len(self._records),
            "completed": completed,
            "in_progress": len(self._records) - completed,
        }

    @staticmethod
    def _parse_target(value: Any) -> int:
        if isinstance(value, bool):
            raise InvalidInputError("Target must be a whole number")
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        try:
            target = int(str(value).strip())
        except ValueError:
            raise InvalidInputError(f"Target must be a whole number: {value!r}") from None

        if target < 1:
            raise InvalidInputError("Target must be at least 1")
        return target

    @staticmethod
    def _parse_target_date(value: Any) -> str:
        if isinstance(value, date):
            return value.isoformat()
        text = str(value or "").strip()
        if not text:
            return ""
        try:
            return date.fromisoformat(text).isoformat()
        except ValueError:
            raise InvalidInputError(f"Target date must be YYYY-MM-DD: {text!r}") from None
