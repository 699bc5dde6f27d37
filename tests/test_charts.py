from lifetracker.charts import EXPENSE_COLOR, INCOME_COLOR, build_category_pie, build_monthly_bar


def test_category_pie_uses_registry_colors():
    fig = build_category_pie([{"name": "Food", "value": 200}, {"name": "Legacy", "value": 5}])
    pie = fig.data[0]

    assert list(pie.labels) == ["Food", "Legacy"]
    assert list(pie.values) == [200, 5]
    assert list(pie.marker.colors) == ["#f59e0b", "#6b7280"]
    assert pie.hole == 0.4


def test_monthly_bar_has_income_and_expense_traces():
    series = [{"month": "Jan", "year": 2024, "income": 100.0, "expenses": 40.0}] * 6
    fig = build_monthly_bar(series)

    income, expenses = fig.data
    assert income.name == "income"
    assert income.marker.color == INCOME_COLOR
    assert list(expenses.y) == [40.0] * 6
    assert expenses.marker.color == EXPENSE_COLOR
    assert fig.layout.barmode == "group"
