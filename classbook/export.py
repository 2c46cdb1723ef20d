import os
import logging
from datetime import datetime
import pandas as pd
from openpyxl import load_workbook
from openpyxl.styles import PatternFill, Alignment, Font, Border, Side
from openpyxl.worksheet.page import PageMargins
from classbook.constants import COLUMNS, EXPORT_FOLDER

logger = logging.getLogger(__name__)

COLUMN_WIDTHS = {
    "A": 12,
    "B": 18,
    "C": 18,
    "D": 13,
    "E": 13,
    "F": 13,
    "G": 14,
    "H": 20
}


def default_export_path(today=None):
    today = today or datetime.now()
    return os.path.join(EXPORT_FOLDER, f"class_records_{today.strftime('%Y-%m-%d')}.xlsx")


def _cell_text(value):
    # bytes the roster could not decode show as U+FFFD in the sheet
    return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def export_records(records, file_path=None):
    file_path = file_path or default_export_path()

    folder = os.path.dirname(file_path)
    if folder:
        os.makedirs(folder, exist_ok=True)

    rows = [[_cell_text(v) for v in record.to_row()] for record in records]
    df = pd.DataFrame(rows, columns=COLUMNS, dtype=str)
    df.to_excel(file_path, index=False, engine="openpyxl")

    wb = load_workbook(file_path)
    ws = wb.active
    ws.title = "Class Records"

    header_fill = PatternFill("solid", start_color="4F46E5")
    data_fill = PatternFill("solid", start_color="F8FAFC")

    header_font = Font(bold=True, size=12, color="FFFFFF")
    data_font = Font(size=11)

    thin = Side(style="thin")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)

    for col_idx in range(1, len(COLUMNS) + 1):
        cell = ws.cell(row=1, column=col_idx)
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal="center", vertical="center")
        cell.border = border

    for row in ws.iter_rows(
        min_row=2,
        max_row=ws.max_row,
        min_col=1,
        max_col=len(COLUMNS)
    ):
        for cell in row:
            cell.font = data_font
            cell.alignment = Alignment(horizontal="center", vertical="center")
            cell.fill = data_fill
            cell.border = border

    for letter, width in COLUMN_WIDTHS.items():
        ws.column_dimensions[letter].width = width

    ws.page_margins = PageMargins(
        left=0.3, right=0.3,
        top=0.4, bottom=0.4,
        header=0.3, footer=0.3
    )

    ws.page_setup.orientation = ws.ORIENTATION_LANDSCAPE
    ws.page_setup.paperSize = ws.PAPERSIZE_A4
    ws.page_setup.fitToWidth = 1
    ws.page_setup.fitToHeight = 0

    wb.save(file_path)
    logger.info("Exported %d records to %s", len(rows), file_path)
    return file_path
