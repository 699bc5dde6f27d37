"""Service for managing budget transactions."""

import math
from datetime import date, datetime
from typing import Any, Optional, Union

from pydantic import ValidationError

from lifetracker.config import settings
from lifetracker.exceptions import InvalidInputError
from lifetracker.logging_setup import get_logger
from lifetracker.models import (
    Transaction,
    TransactionDraft,
    TransactionType,
    default_category,
    is_known_category,
)
from lifetracker.services.collection_service import CollectionService
from lifetracker.services.persistence_service import PersistenceService

logger = get_logger(__name__)


class TransactionService(CollectionService[Transaction]):
    """Single source of truth for the budget's transactions."""

    model = Transaction

    def __init__(
        self,
        persistence: Optional[PersistenceService] = None,
        key: Optional[str] = None,
    ):
        super().__init__(key or settings.budget_storage_key, persistence)

    def add(self, draft: Union[TransactionDraft, dict[str, Any]]) -> Transaction:
        """
        Validate a draft and store it as the newest transaction.

        Raises:
            InvalidInputError: if any field is rejected; nothing is stored
        """
        if isinstance(draft, dict):
            try:
                draft = TransactionDraft.model_validate(draft)
            except ValidationError as e:
                raise InvalidInputError(f"Malformed transaction: {e}") from e

        txn_type = self._parse_type(draft.type)
        amount = self._parse_amount(draft.amount)
        description = (draft.description or "").strip()
        if not description:
            raise InvalidInputError("Description is required")

        category = (draft.category or "").strip() or default_category(txn_type.value).id
        if not is_known_category(category, txn_type.value):
            raise InvalidInputError(
                f"Unknown {txn_type.value} category: {category!r}"
            )

        transaction = Transaction(
            id=self._next_id(),
            type=txn_type,
            amount=amount,
            description=description,
            category=category,
            date=self._parse_date(draft.date),
        )
        self._prepend(transaction)
        logger.info(
            "Added %s %s of %.2f in %s",
            transaction.type.value,
            transaction.id,
            transaction.amount,
            transaction.category,
        )
        return transaction

    @staticmethod
    def _parse_type(value: Any) -> TransactionType:
        try:
            return TransactionType(value)
        except ValueError:
            raise InvalidInputError(f"Unknown transaction type: {value!r}") from None

    @staticmethod
    def _parse_amount(value: Any) -> float:
        """Parse amount input to a positive float rounded to cents."""
        if value is None or isinstance(value, bool):
            raise InvalidInputError("Amount is required")

        text = str(value).strip()
        if not text:
            raise InvalidInputError("Amount is required")

        try:
            amount = float(text)
        except ValueError:
            raise InvalidInputError(f"Amount is not a number: {text!r}") from None

        if not math.isfinite(amount):
            raise InvalidInputError(f"Amount is not a number: {text!r}")

        # Currency amounts are kept to the cent
        amount = round(amount, 2)
        if amount <= 0:
            raise InvalidInputError("Amount must be at least 0.01")
        return amount

    @staticmethod
    def _parse_date(value: Any) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if value is None or not str(value).strip():
            return date.today()

        try:
            return date.fromisoformat(str(value).strip())
        except ValueError:
            raise InvalidInputError(f"Date must be YYYY-MM-DD: {value!r}") from None
