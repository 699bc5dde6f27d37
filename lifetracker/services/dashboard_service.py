"""Budget page session: the transaction store plus the list filter."""

from datetime import date
from typing import Any, Optional, Union

from lifetracker.exceptions import InvalidInputError
from lifetracker.logging_setup import get_logger
from lifetracker.models import Transaction, TransactionDraft
from lifetracker.services.analytics_service import FILTER_MODES, AnalyticsService
from lifetracker.services.export_service import ExportService
from lifetracker.services.transaction_service import TransactionService

logger = get_logger(__name__)


class BudgetDashboardService:
    """Commands and read models consumed by the budget page.

    Read models are computed from the current collection on every access.
    """

    def __init__(
        self,
        transaction_service: Optional[TransactionService] = None,
        analytics_service: Optional[AnalyticsService] = None,
        export_service: Optional[ExportService] = None,
    ):
        self.transaction_service = transaction_service or TransactionService()
        self.analytics_service = analytics_service or AnalyticsService()
        self.export_service = export_service or ExportService()
        self.filter = "all"

    # Commands

    def add_transaction(
        self, draft: Union[TransactionDraft, dict[str, Any]]
    ) -> Transaction:
        return self.transaction_service.add(draft)

    def delete_transaction(self, transaction_id: str) -> None:
        self.transaction_service.remove(transaction_id)

    def clear_transactions(self) -> None:
        """Delete every transaction."""
        count = len(self.transaction_service)
        self.transaction_service.clear()
        logger.info("Cleared %d transactions", count)

    def set_filter(self, mode: str) -> None:
        """Change which transactions the list shows."""
        if mode not in FILTER_MODES:
            raise InvalidInputError(f"Unknown filter: {mode!r}")
        self.filter = mode
        logger.debug("Transaction filter set to %s", mode)

    # Read models

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self.transaction_service.list()

    @property
    def totals(self) -> dict[str, float]:
        return self.analytics_service.get_totals(self.transactions)

    @property
    def category_data(self) -> list[dict[str, Any]]:
        return self.analytics_service.get_category_breakdown(self.transactions)

    @property
    def monthly_data(self) -> list[dict[str, Any]]:
        return self.analytics_service.get_monthly_series(self.transactions)

    @property
    def visible_transactions(self) -> list[Transaction]:
        return self.analytics_service.get_filtered_transactions(
            self.transactions, self.filter
        )

    def export_csv(self, today: Optional[date] = None) -> tuple[str, str]:
        """
        Encode the whole collection for download.

        Returns:
            Tuple of (filename, CSV content)
        """
        content = self.export_service.encode(self.transactions)
        filename = self.export_service.export_filename(today)
        logger.info("Exported %d transactions to %s", len(self.transactions), filename)
        return filename, content
