from datetime import date

import pytest

from lifetracker.exceptions import InvalidInputError
from lifetracker.services import BudgetDashboardService


def test_read_models_follow_every_mutation():
    dashboard = BudgetDashboardService()
    assert dashboard.totals == {"income": 0, "expenses": 0, "balance": 0}
    assert len(dashboard.monthly_data) == 6

    pay = dashboard.add_transaction(
        {"type": "income", "amount": "1000", "description": "Pay", "category": "salary"}
    )
    dashboard.add_transaction({"type": "expense", "amount": "200", "description": "Food", "category": "food"})
    assert dashboard.totals == {"income": 1000, "expenses": 200, "balance": 800}
    assert dashboard.category_data == [{"name": "Food", "value": 200}]
    assert dashboard.monthly_data[-1]["income"] == 1000

    dashboard.delete_transaction(pay.id)
    assert dashboard.totals == {"income": 0, "expenses": 200, "balance": -200}


def test_scenario_c_rejected_add_leaves_collection_empty():
    dashboard = BudgetDashboardService()
    with pytest.raises(InvalidInputError):
        dashboard.add_transaction({"amount": "", "description": "x"})
    assert dashboard.transactions == ()


def test_set_filter_changes_visible_transactions():
    dashboard = BudgetDashboardService()
    dashboard.add_transaction({"type": "expense", "amount": 5, "description": "Old", "date": "2024-01-01"})
    dashboard.add_transaction({"type": "income", "amount": 9, "description": "Pay", "date": "2024-01-03"})
    dashboard.add_transaction({"type": "expense", "amount": 7, "description": "New", "date": "2024-01-02"})

    assert [t.description for t in dashboard.visible_transactions] == ["Pay", "New", "Old"]

    dashboard.set_filter("expense")
    assert [t.description for t in dashboard.visible_transactions] == ["New", "Old"]

    with pytest.raises(InvalidInputError):
        dashboard.set_filter("bogus")
    assert dashboard.filter == "expense"


def test_export_csv_uses_storage_order():
    dashboard = BudgetDashboardService()
    dashboard.add_transaction({"amount": 1, "description": "first", "date": "2024-01-01"})
    dashboard.add_transaction({"amount": 2, "description": "second", "date": "2023-12-01"})

    filename, content = dashboard.export_csv(today=date(2024, 1, 2))
    assert filename == "budget-export-2024-01-02.csv"
    assert content.splitlines()[1:] == [
        '2023-12-01,expense,food,"second",2.00',
        '2024-01-01,expense,food,"first",1.00',
    ]


def test_clear_transactions_empties_and_persists():
    dashboard = BudgetDashboardService()
    dashboard.add_transaction({"amount": 1, "description": "a"})
    dashboard.add_transaction({"type": "income", "amount": 5, "description": "b"})

    dashboard.clear_transactions()
    assert dashboard.transactions == ()
    assert dashboard.totals == {"income": 0, "expenses": 0, "balance": 0}
    assert BudgetDashboardService().transactions == ()
