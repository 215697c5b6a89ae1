#!/usr/bin/env python3
"""
Excel report helpers for tokenization results.

One row per filename: the original string, the token count, then one
column per token. Cells are coloured by token type and enclosed tokens are
rendered bold, so a reviewer can see at a glance how a name was split.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table, TableStyleInfo

from .token import TokenizationResult, TokenType


logger = logging.getLogger(__name__)


TOKEN_TYPE_COLORS: Dict[TokenType, str] = {
    TokenType.BRACKET: "ADD8E6",     # Light blue
    TokenType.DELIMITER: "D3D3D3",   # Light grey
    TokenType.IDENTIFIER: "90EE90",  # Light green
}

MAX_COLUMN_WIDTH = 50


@dataclass(frozen=True)
class ExcelSheetData:
    """
    Describes a sheet to be written to the workbook.

    Attributes:
        name: Sheet/tab name.
        headers: Ordered list of column headers.
        rows: Row values already ordered to match headers.
        fills: Optional per-cell hex colours (None leaves the cell unfilled).
        bold_cells: Optional per-cell bold markers.
    """

    name: str
    headers: Sequence[str]
    rows: Sequence[Sequence[Any]]
    fills: Optional[Sequence[Sequence[Optional[str]]]] = None
    bold_cells: Optional[Sequence[Sequence[bool]]] = None


def _cell_flag(grid: Optional[Sequence[Sequence[Any]]], row: int, col: int) -> Any:
    if grid is None or row >= len(grid) or col >= len(grid[row]):
        return None
    return grid[row][col]


def tokens_sheet(results: Sequence[TokenizationResult], name: str = "Tokens") -> ExcelSheetData:
    """
    Lay out tokenization results as a sheet.

    Args:
        results: Tokenization results, one per row
        name: Sheet name

    Returns:
        ExcelSheetData ready for write_excel_workbook
    """
    max_tokens = max((len(result.tokens) for result in results), default=0)
    headers = ["original", "token_count"] + [f"token{i}" for i in range(max_tokens)]

    rows: List[List[Any]] = []
    fills: List[List[Optional[str]]] = []
    bold_cells: List[List[bool]] = []
    for result in results:
        padding = max_tokens - len(result.tokens)
        rows.append([result.original, len(result.tokens)] + result.values + [""] * padding)
        fills.append([None, None] + [TOKEN_TYPE_COLORS.get(token.type) for token in result.tokens])
        bold_cells.append([False, False] + [token.enclosed for token in result.tokens])

    return ExcelSheetData(name=name, headers=headers, rows=rows, fills=fills, bold_cells=bold_cells)


def _write_excel_sheet(ws, sheet: ExcelSheetData) -> None:
    """Render a single sheet using provided headers/rows and cell styling."""
    ws.title = sheet.name

    headers = list(sheet.headers)
    for col_idx, header in enumerate(headers, 1):
        ws.cell(row=1, column=col_idx, value=header)

    bold_font = Font(bold=True)
    widths = [len(header) for header in headers]

    for row_idx, row in enumerate(sheet.rows):
        for col_idx, value in enumerate(row):
            cell = ws.cell(row=row_idx + 2, column=col_idx + 1, value=value)

            color = _cell_flag(sheet.fills, row_idx, col_idx)
            if color:
                cell.fill = PatternFill(start_color=color, end_color=color, fill_type="solid")
            if _cell_flag(sheet.bold_cells, row_idx, col_idx):
                cell.font = bold_font

            if value is not None and col_idx < len(widths):
                widths[col_idx] = max(widths[col_idx], len(str(value)))

    for col_idx, width in enumerate(widths, 1):
        ws.column_dimensions[get_column_letter(col_idx)].width = min(width + 2, MAX_COLUMN_WIDTH)

    if sheet.rows:
        last_col = get_column_letter(len(headers))
        table = Table(
            displayName=sheet.name.replace(" ", "") + "Table",
            ref=f"A1:{last_col}{len(sheet.rows) + 1}",
        )
        table.tableStyleInfo = TableStyleInfo(
            name="TableStyleMedium9",
            showFirstColumn=False,
            showLastColumn=False,
            showRowStripes=True,
            showColumnStripes=False,
        )
        ws.add_table(table)


def write_excel_workbook(output_path: Path | str, sheets: Sequence[ExcelSheetData]) -> Path:
    """
    Write the given sheets, in order, to a new workbook.

    Sheet names double as table names, so they must be unique.

    Args:
        output_path: Destination path; missing parent folders are created.
        sheets: Sheet definitions to render.

    Returns:
        Path to the written workbook.
    """
    if not sheets:
        raise ValueError("At least one sheet must be provided to write a workbook.")
    names = [sheet.name for sheet in sheets]
    if len(set(names)) != len(names):
        raise ValueError(f"Sheet names must be unique: {names}")

    wb = Workbook()
    wb.remove(wb.active)
    for sheet in sheets:
        _write_excel_sheet(wb.create_sheet(sheet.name), sheet)

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    logger.debug("Wrote %s sheet(s) to %s", len(sheets), path)
    return path
