"""
Report export to CSV and Excel.

Rows are the frozen dataclasses produced by ``inventory_engines.reports``
(any dataclass rows work).  Columns follow dataclass field order; the
header row uses the field names.  An empty row set writes an empty file
(CSV) or an empty sheet (XLSX).
"""

from __future__ import annotations

import csv
import dataclasses
from datetime import date
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Sequence

from openpyxl import Workbook

from inventory_kernel.exceptions import UnsupportedExportFormatError
from inventory_kernel.logging_config import get_logger

logger = get_logger("services.report_export")

SUPPORTED_FORMATS = ("csv", "xlsx")


def _columns(rows: Sequence[Any]) -> list[str]:
    return [f.name for f in dataclasses.fields(rows[0])]


def _csv_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _xlsx_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (int, Decimal, date, str)) or value is None:
        return value
    return str(value)


def write_csv(rows: Sequence[Any], destination: Path) -> None:
    with open(destination, "w", newline="", encoding="utf-8") as f:
        if not rows:
            return
        columns = _columns(rows)
        writer = csv.writer(f)
        writer.writerow(columns)
        for row in rows:
            writer.writerow([_csv_value(getattr(row, c)) for c in columns])


def write_xlsx(rows: Sequence[Any], destination: Path, sheet_title: str = "Report") -> None:
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title
    if rows:
        columns = _columns(rows)
        ws.append(columns)
        for row in rows:
            ws.append([_xlsx_value(getattr(row, c)) for c in columns])
    wb.save(destination)


def export_report(
    rows: Sequence[Any],
    fmt: str,
    destination: Path | str,
    sheet_title: str = "Report",
) -> Path:
    """
    Write report rows to ``destination`` as ``fmt`` ("csv" or "xlsx").

    Raises:
        UnsupportedExportFormatError: for any other format.
    """
    fmt = fmt.lower()
    if fmt not in SUPPORTED_FORMATS:
        raise UnsupportedExportFormatError(fmt, SUPPORTED_FORMATS)

    path = Path(destination)
    if fmt == "csv":
        write_csv(rows, path)
    else:
        write_xlsx(rows, path, sheet_title=sheet_title)

    logger.info("report_exported", extra={
        "format": fmt,
        "row_count": len(rows),
        "destination": str(path),
    })
    return path
