import json
import logging
from datetime import date

import pytest
from sqlmodel import SQLModel

from lifetracker import database
from lifetracker.exceptions import PersistenceWriteError
from lifetracker.models import Goal, Habit, Transaction
from lifetracker.services import LocalStorage, PersistenceService, TransactionService


def test_local_storage_get_and_overwrite():
    storage = LocalStorage()
    assert storage.get_item("k") is None

    storage.set_item("k", "one")
    storage.set_item("k", "two")
    assert storage.get_item("k") == "two"
    assert storage.get_item("other") is None


def test_load_missing_key_is_empty(persistence):
    assert persistence.load("budgetTransactions", Transaction) == []


def test_save_then_load_round_trips_in_order(persistence, scenario_a):
    assert persistence.save("budgetTransactions", scenario_a) is True
    assert persistence.load("budgetTransactions", Transaction) == scenario_a


def test_saved_layout_uses_plain_json_records(persistence, scenario_a):
    persistence.save("budgetTransactions", scenario_a)
    raw = json.loads(LocalStorage().get_item("budgetTransactions"))
    assert raw[0] == {
        "id": "1",
        "type": "income",
        "amount": 1000.0,
        "description": "Pay",
        "category": "salary",
        "date": "2024-01-15",
    }


def test_camel_case_keys_for_habits_and_goals(persistence):
    persistence.save("habits", [Habit(id="1", name="Run", created_at="2024-01-01T00:00:00+00:00")])
    persistence.save("goals", [Goal(id="2", name="Read", target=50, target_date="2024-12-31")])

    habit = json.loads(LocalStorage().get_item("habits"))[0]
    goal = json.loads(LocalStorage().get_item("goals"))[0]
    assert habit["createdAt"] == "2024-01-01T00:00:00+00:00"
    assert goal["targetDate"] == "2024-12-31"
    assert persistence.load("goals", Goal)[0].target_date == "2024-12-31"


def test_corrupt_json_loads_as_empty(persistence, caplog):
    LocalStorage().set_item("budgetTransactions", "{not json")
    with caplog.at_level(logging.WARNING):
        assert persistence.load("budgetTransactions", Transaction) == []
    assert "corrupt" in caplog.text


def test_non_list_value_loads_as_empty(persistence):
    LocalStorage().set_item("budgetTransactions", '{"id": "1"}')
    assert persistence.load("budgetTransactions", Transaction) == []


def test_invalid_records_are_skipped(persistence, caplog):
    items = [
        {"id": 1700000000000, "type": "expense", "amount": "12.50", "description": "Lunch", "category": "food", "date": "2024-02-01"},
        {"id": "2", "type": "refund", "amount": 5, "description": "?", "category": "food", "date": "2024-02-01"},
        {"id": "3", "type": "income"},
    ]
    LocalStorage().set_item("budgetTransactions", json.dumps(items))

    with caplog.at_level(logging.WARNING):
        loaded = persistence.load("budgetTransactions", Transaction)

    assert len(loaded) == 1
    assert loaded[0].id == "1700000000000"
    assert loaded[0].amount == 12.5
    assert loaded[0].date == date(2024, 2, 1)
    assert caplog.text.count("Skipping invalid") == 2


class FailingStorage(LocalStorage):
    def set_item(self, key, value):
        raise PersistenceWriteError(key, "quota exceeded")


def test_write_failure_is_reported_not_raised(scenario_a, caplog):
    persistence = PersistenceService(storage=FailingStorage())
    with caplog.at_level(logging.ERROR):
        assert persistence.save("budgetTransactions", scenario_a) is False
    assert "quota exceeded" in caplog.text


def test_database_errors_become_write_errors():
    SQLModel.metadata.drop_all(database.engine)
    with pytest.raises(PersistenceWriteError) as excinfo:
        LocalStorage().set_item("k", "v")
    assert excinfo.value.key == "k"


def test_unreadable_store_loads_as_empty(persistence):
    SQLModel.metadata.drop_all(database.engine)
    assert persistence.load("habits", Habit) == []


def test_duplicate_ids_keep_first_record(persistence, caplog):
    items = [
        {"id": "1", "type": "expense", "amount": 4, "description": "First", "category": "food", "date": "2024-03-01"},
        {"id": "1", "type": "expense", "amount": 9, "description": "Copy", "category": "food", "date": "2024-03-02"},
        {"id": "2", "type": "income", "amount": 50, "description": "Pay", "category": "salary", "date": "2024-03-03"},
    ]
    LocalStorage().set_item("budgetTransactions", json.dumps(items))

    with caplog.at_level(logging.WARNING):
        loaded = persistence.load("budgetTransactions", Transaction)

    assert [(t.id, t.description) for t in loaded] == [("1", "First"), ("2", "Pay")]
    assert "duplicate id 1" in caplog.text


def test_removing_a_duplicated_id_leaves_other_records():
    items = [
        {"id": "1", "type": "expense", "amount": 4, "description": "First", "category": "food", "date": "2024-03-01"},
        {"id": "1", "type": "expense", "amount": 9, "description": "Copy", "category": "food", "date": "2024-03-02"},
        {"id": "2", "type": "income", "amount": 50, "description": "Pay", "category": "salary", "date": "2024-03-03"},
    ]
    LocalStorage().set_item("budgetTransactions", json.dumps(items))

    service = TransactionService()
    assert [t.id for t in service.list()] == ["1", "2"]

    service.remove("1")
    assert [t.id for t in service.list()] == ["2"]


def test_use_database_switches_the_backing_file(tmp_path):
    LocalStorage().set_item("habits", "[]")

    engine = database.use_database(f"sqlite:///{tmp_path / 'other.db'}")
    try:
        assert LocalStorage().get_item("habits") is None
        assert (tmp_path / "other.db").exists()
    finally:
        engine.dispose()
