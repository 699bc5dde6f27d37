"""Service for budget analytics derived from the transaction list."""

import calendar
from collections import defaultdict
from datetime import date
from typing import Any, Iterable, Optional, Sequence

from lifetracker.exceptions import InvalidInputError
from lifetracker.models import Transaction, TransactionType, resolve_category

FILTER_MODES = ("all", "income", "expense")
MONTHS_IN_SERIES = 6


class AnalyticsService:
    """Pure computations over a transaction collection.

    Nothing is cached; callers recompute after every change to the collection.
    """

    def get_totals(self, transactions: Iterable[Transaction]) -> dict[str, float]:
        """
        Sum income and expenses, rounded to cents.

        Returns dict with 'income', 'expenses' and 'balance'
        """
        income = 0.0
        expenses = 0.0
        for t in transactions:
            if t.type == TransactionType.INCOME:
                income += t.amount
            else:
                expenses += t.amount

        income = round(income, 2)
        expenses = round(expenses, 2)
        return {
            "income": income,
            "expenses": expenses,
            "balance": round(income - expenses, 2),
        }

    @staticmethod
    def is_balance_positive(totals: dict[str, float]) -> bool:
        return totals["balance"] >= 0

    def get_category_breakdown(
        self, transactions: Iterable[Transaction]
    ) -> list[dict[str, Any]]:
        """
        Total expenses per category display name, in first-seen order.

        Unknown category ids are counted under "Other".
        """
        by_name: dict[str, float] = defaultdict(float)
        for t in transactions:
            if t.type != TransactionType.EXPENSE:
                continue
            name = resolve_category(t.category, t.type.value).name
            by_name[name] += t.amount

        return [{"name": name, "value": round(value, 2)} for name, value in by_name.items()]

    def get_monthly_series(
        self,
        transactions: Iterable[Transaction],
        today: Optional[date] = None,
    ) -> list[dict[str, Any]]:
        """
        Income and expenses for the current month and the five before it.

        Buckets are keyed by (year, month), oldest first, and labelled with
        the short month name.
        """
        today = today or date.today()

        buckets: dict[tuple[int, int], dict[str, Any]] = {}
        for offset in range(MONTHS_IN_SERIES - 1, -1, -1):
            year, month = self._shift_month(today.year, today.month, -offset)
            buckets[(year, month)] = {
                "month": calendar.month_abbr[month],
                "year": year,
                "income": 0.0,
                "expenses": 0.0,
            }

        for t in transactions:
            bucket = buckets.get((t.date.year, t.date.month))
            if bucket is None:
                continue
            if t.type == TransactionType.INCOME:
                bucket["income"] += t.amount
            else:
                bucket["expenses"] += t.amount

        for bucket in buckets.values():
            bucket["income"] = round(bucket["income"], 2)
            bucket["expenses"] = round(bucket["expenses"], 2)
        return list(buckets.values())

    @staticmethod
    def has_monthly_activity(series: Sequence[dict[str, Any]]) -> bool:
        return any(m["income"] > 0 or m["expenses"] > 0 for m in series)

    def get_filtered_transactions(
        self, transactions: Iterable[Transaction], mode: str = "all"
    ) -> list[Transaction]:
        """
        Transactions matching ``mode``, newest date first.

        Equal dates keep their input order.

        Raises:
            InvalidInputError: if ``mode`` is not all, income or expense
        """
        if mode not in FILTER_MODES:
            raise InvalidInputError(f"Unknown filter: {mode!r}")

        selected = [t for t in transactions if mode == "all" or t.type.value == mode]
        return sorted(selected, key=lambda t: t.date, reverse=True)

    @staticmethod
    def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
        index = year * 12 + (month - 1) + delta
        return index // 12, index % 12 + 1
