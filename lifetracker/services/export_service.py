"""Service for exporting transactions as CSV text."""

from datetime import date
from typing import Iterable, Optional

from lifetracker.models import Transaction

HEADERS = ("Date", "Type", "Category", "Description", "Amount")
MEDIA_TYPE = "text/csv"
FILENAME_PREFIX = "budget-export"


class ExportService:
    """Encode transactions for download. Performs no I/O."""

    def encode(self, transactions: Iterable[Transaction]) -> str:
        """
        Build the CSV document in the collection's iteration order.

        The description column is always quoted, with embedded quotes doubled.
        """
        lines = [",".join(HEADERS)]
        for t in transactions:
            lines.append(
                ",".join(
                    [
                        t.date.isoformat(),
                        t.type.value,
                        t.category,
                        self._quote(t.description),
                        f"{t.amount:.2f}",
                    ]
                )
            )
        return "\n".join(lines)

    @staticmethod
    def export_filename(today: Optional[date] = None) -> str:
        """File name for an export made on ``today``."""
        today = today or date.today()
        return f"{FILENAME_PREFIX}-{today.isoformat()}.csv"

    @staticmethod
    def _quote(value: str) -> str:
        return '"' + value.replace('"', '""') + '"'
