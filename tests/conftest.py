"""Pytest configuration for test isolation.

Every service persists through the module-level engine in
``lifetracker.database``. Each test gets its own SQLite file under
``tmp_path`` so stored collections never leak between tests.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from lifetracker import database
from lifetracker.models import Transaction, TransactionType
from lifetracker.services import PersistenceService


@pytest.fixture(autouse=True)
def _isolate_database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    # Restored after the test
    monkeypatch.setattr(database, "engine", database.engine)
    engine = database.use_database(f"sqlite:///{tmp_path / 'lifetracker-test.db'}")
    yield
    engine.dispose()


@pytest.fixture
def persistence() -> PersistenceService:
    return PersistenceService()


def make_transaction(
    txn_id: str,
    txn_type: str,
    amount: float,
    description: str,
    category: str,
    on: date,
) -> Transaction:
    return Transaction(
        id=txn_id,
        type=TransactionType(txn_type),
        amount=amount,
        description=description,
        category=category,
        date=on,
    )


@pytest.fixture
def scenario_a() -> list[Transaction]:
    return [
        make_transaction("1", "income", 1000, "Pay", "salary", date(2024, 1, 15)),
        make_transaction("2", "expense", 200, "Food", "food", date(2024, 1, 16)),
    ]


@pytest.fixture
def make_txn():
    return make_transaction
