"""Transaction records for the budget tracker."""

import datetime as dt
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class Transaction(BaseModel):
    """An immutable income or expense entry."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    type: TransactionType
    amount: float = Field(gt=0)
    description: str = Field(min_length=1)
    category: str
    date: dt.date


class TransactionDraft(BaseModel):
    """Raw form submission, validated by ``TransactionService.add``."""

    type: str = TransactionType.EXPENSE.value
    amount: Union[str, float, int, None] = ""
    description: str = ""
    category: str = ""
    date: Union[dt.date, str, None] = None
