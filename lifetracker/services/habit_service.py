"""Service for managing habits."""

from datetime import datetime, timezone
from typing import Optional

from lifetracker.config import settings
from lifetracker.exceptions import InvalidInputError
from lifetracker.logging_setup import get_logger
from lifetracker.models import Habit
from lifetracker.services.collection_service import CollectionService
from lifetracker.services.persistence_service import PersistenceService

logger = get_logger(__name__)


class HabitService(CollectionService[Habit]):
    """Daily habits with streak counting."""

    model = Habit

    def __init__(
        self,
        persistence: Optional[PersistenceService] = None,
        key: Optional[str] = None,
    ):
        super().__init__(key or settings.habits_storage_key, persistence)

    def add(self, name: str, description: str = "") -> Habit:
        """
        Create a pending habit with no streak.

        Raises:
            InvalidInputError: if the name is blank
        """
        name = (name or "").strip()
        if not name:
            raise InvalidInputError("Habit name is required")

        habit = Habit(
            id=self._next_id(),
            name=name,
            description=(description or "").strip(),
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        logger.info("Added habit %s: %s", habit.id, habit.name)
        return self._prepend(habit)

    def toggle(self, habit_id: str) -> Optional[Habit]:
        """
        Flip today's completion.

        Completing extends the streak by one; un-completing shortens it,
        never below zero.

        Returns:
            The updated habit, or None if not found
        """
        habit = self.get(habit_id)
        if habit is None:
            return None

        completed = not habit.completed
        streak = habit.streak + 1 if completed else max(0, habit.streak - 1)
        return self._update(habit_id, completed=completed, streak=streak)

    def reset_all(self) -> None:
        """Mark every habit pending and zero all streaks."""
        self._replace(
            [h.model_copy(update={"completed": False, "streak": 0}) for h in self._records]
        )
        logger.info("Reset %d habits", len(self._records))

    def stats(self) -> dict[str, int]:
        """
        Count habits.

        Returns dict with 'total', 'completed' and 'pending'
        """
        completed = sum(1 for h in self._records if h.completed)
        return {
            "total": len(self._records),
            "completed": completed,
            "pending": len(self._records) - completed,
        }
