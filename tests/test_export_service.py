from datetime import date

from lifetracker.services import ExportService
from lifetracker.services.export_service import MEDIA_TYPE

exporter = ExportService()


def test_encode_keeps_collection_order(scenario_a):
    assert exporter.encode(scenario_a) == (
        "Date,Type,Category,Description,Amount\n"
        '2024-01-15,income,salary,"Pay",1000.00\n'
        '2024-01-16,expense,food,"Food",200.00'
    )


def test_encode_empty_collection_is_header_only():
    assert exporter.encode([]) == "Date,Type,Category,Description,Amount"


def test_embedded_quotes_are_doubled(make_txn):
    txn = make_txn("1", "expense", 3.5, 'The "good" one, really', "food", date(2024, 5, 1))
    row = exporter.encode([txn]).splitlines()[1]
    assert row == '2024-05-01,expense,food,"The ""good"" one, really",3.50'


def test_export_filename():
    assert exporter.export_filename(date(2024, 7, 4)) == "budget-export-2024-07-04.csv"
    assert MEDIA_TYPE == "text/csv"
