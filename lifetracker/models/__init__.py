"""Record types and storage tables."""

from lifetracker.models.category import (
    CATEGORIES,
    Category,
    category_color,
    default_category,
    fallback_category,
    get_categories,
    is_known_category,
    resolve_category,
)
from lifetracker.models.goal import Goal
from lifetracker.models.habit import Habit
from lifetracker.models.storage import StoredValue
from lifetracker.models.transaction import Transaction, TransactionDraft, TransactionType

__all__ = [
    "CATEGORIES",
    "Category",
    "Goal",
    "Habit",
    "StoredValue",
    "Transaction",
    "TransactionDraft",
    "TransactionType",
    "category_color",
    "default_category",
    "fallback_category",
    "get_categories",
    "is_known_category",
    "resolve_category",
]
