"""
Tabulator & Spreadsheet Export
==============================
Flattens heading records into the fixed 12-column schema and writes them
to a single-sheet workbook.

Cells are addressed spreadsheet-style: header in row 1, data from row 2,
columns A..L in ``OUTPUT_COLUMNS`` order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

import pandas as pd
from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from .models import COLUMN_WIDTHS, OUTPUT_COLUMNS, HeadingRecord, Row

logger = logging.getLogger(__name__)


@dataclass
class Sheet:
    """A sparse sheet description handed to the workbook writer."""
    name: str
    cells: Dict[str, str] = field(default_factory=dict)
    ref: str = ""
    col_widths: List[int] = field(default_factory=list)


def build_rows(records: Iterable[HeadingRecord]) -> List[Row]:
    return [record.to_row() for record in records]


def rows_frame(rows: Sequence[Row]) -> pd.DataFrame:
    """Row objects as a DataFrame with the output columns in order."""
    return pd.DataFrame([row.values() for row in rows], columns=list(OUTPUT_COLUMNS))


def encode_cells(frame: pd.DataFrame) -> Dict[str, str]:
    """Map ``A1``-style addresses to values, header first, row by row."""
    cells: Dict[str, str] = {}
    for col, name in enumerate(frame.columns, 1):
        cells[f"{get_column_letter(col)}1"] = name
    for row_num, values in enumerate(frame.itertuples(index=False, name=None), 2):
        for col, value in enumerate(values, 1):
            cells[f"{get_column_letter(col)}{row_num}"] = value
    return cells


def cell_range(cells: Dict[str, str]) -> str:
    """``first:last`` over the populated addresses (insertion order)."""
    if not cells:
        return ""
    addresses = list(cells)
    return f"{addresses[0]}:{addresses[-1]}"


def tabulate(records: Iterable[HeadingRecord], sheet_name: str = "mySheet") -> Sheet:
    """Turn heading records into a sheet: N records -> N + 1 rows."""
    cells = encode_cells(rows_frame(build_rows(records)))
    return Sheet(
        name=sheet_name,
        cells=cells,
        ref=cell_range(cells),
        col_widths=list(COLUMN_WIDTHS),
    )


def write_workbook(sheet: Sheet, filepath: str) -> str:
    """Write ``sheet`` as the only sheet of an .xlsx file, overwriting it."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    ws = wb.active
    ws.title = sheet.name
    # Plain text cells: a leading '=' must not turn into a formula.
    for address, value in sheet.cells.items():
        cell = ws[address]
        cell.value = value
        cell.data_type = "s"
    for col, width in enumerate(sheet.col_widths, 1):
        ws.column_dimensions[get_column_letter(col)].width = width

    wb.save(path)
    logger.info(f"[EXPORT] {sheet.ref} written to {path.absolute()}")
    return str(path.absolute())


def export_xlsx(
    records: Iterable[HeadingRecord],
    filepath: str = "output.xlsx",
    sheet_name: str = "mySheet",
) -> str:
    return write_workbook(tabulate(records, sheet_name), filepath)
