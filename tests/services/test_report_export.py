"""
Tests for CSV and Excel report export.
"""

import csv
from datetime import timedelta
from decimal import Decimal

import pytest
from openpyxl import load_workbook

from inventory_engines.reports import (
    profit_margin_report,
    stock_aging_report,
    supplier_performance_report,
)
from inventory_kernel.exceptions import UnsupportedExportFormatError
from inventory_services.report_export import SUPPORTED_FORMATS, export_report


@pytest.fixture
def margin_rows(item):
    return profit_margin_report([
        item(1, "10", name="Widget", unit_price="15"),
        item(1, "3", name="Gadget", unit_price="4"),
    ])


class TestCsvExport:
    """Tests for CSV output."""

    def test_header_and_rows(self, margin_rows, tmp_path):
        path = export_report(margin_rows, "csv", tmp_path / "margins.csv")
        with open(path, newline="") as f:
            rows = list(csv.reader(f))
        assert rows[0] == [
            "id", "name", "unit_cost", "unit_price",
            "profit_margin_absolute", "profit_margin_percentage",
        ]
        assert rows[1][1] == "Widget"
        assert rows[1][5] == "33.33"
        assert len(rows) == 3

    def test_dates_written_iso(self, item, as_of_date, tmp_path):
        rows = stock_aging_report(
            [item(2, "1", purchase_date=as_of_date - timedelta(days=3))], as_of_date
        )
        path = export_report(rows, "csv", tmp_path / "aging.csv")
        with open(path, newline="") as f:
            record = next(csv.DictReader(f))
        assert record["purchase_date"] == "2024-06-12"
        assert record["days_in_stock"] == "3"

    def test_none_written_empty(self, item, tmp_path):
        rows = supplier_performance_report([item(1, "1", supplier_id="ZZZ")], ())
        path = export_report(rows, "csv", tmp_path / "suppliers.csv")
        with open(path, newline="") as f:
            record = next(csv.DictReader(f))
        assert record["quality_rating"] == ""

    def test_empty_rows_empty_file(self, tmp_path):
        path = export_report((), "csv", tmp_path / "empty.csv")
        assert path.read_text() == ""

    def test_format_case_insensitive(self, margin_rows, tmp_path):
        assert export_report(margin_rows, "CSV", tmp_path / "m.csv").exists()


class TestXlsxExport:
    """Tests for Excel output."""

    def test_workbook_contents(self, margin_rows, tmp_path):
        path = export_report(margin_rows, "xlsx", tmp_path / "margins.xlsx", sheet_title="profit_margins")
        ws = load_workbook(path).active
        assert ws.title == "profit_margins"
        values = list(ws.iter_rows(values_only=True))
        assert values[0][0] == "id"
        assert values[1][1] == "Widget"
        assert Decimal(str(values[1][5])) == Decimal("33.33")
        assert len(values) == 3

    def test_empty_rows_empty_sheet(self, tmp_path):
        path = export_report((), "xlsx", tmp_path / "empty.xlsx")
        ws = load_workbook(path).active
        assert ws.max_row == 1
        assert ws.cell(1, 1).value is None


class TestUnsupportedFormat:
    def test_rejected(self, margin_rows, tmp_path):
        with pytest.raises(UnsupportedExportFormatError) as exc_info:
            export_report(margin_rows, "pdf", tmp_path / "m.pdf")
        assert exc_info.value.fmt == "pdf"
        assert exc_info.value.supported == SUPPORTED_FORMATS
        assert not (tmp_path / "m.pdf").exists()
