"""
Excel workbook generator for leaderboard stats.
"""

import os
from typing import Any
import pandas as pd
import xlsxwriter

from ..utils.constants import EXCEL_COLORS
from ..utils.log import info

SHEET_NAME = 'Average Times'


def get_header_format(workbook) -> Any:
    """Get header cell format."""
    return workbook.add_format({
        'bold': True,
        'bg_color': EXCEL_COLORS['header_blue'],
        'font_color': EXCEL_COLORS['header_gold'],
        'border': 1,
        'align': 'center',
        'valign': 'vcenter',
    })


def get_row_formats(workbook) -> tuple:
    """Get (default, alternate) row formats."""
    default_format = workbook.add_format({'border': 1, 'align': 'center'})
    alt_format = workbook.add_format({
        'bg_color': EXCEL_COLORS['alt_row'],
        'border': 1,
        'align': 'center',
    })
    return default_format, alt_format


def write_stats_workbook(table: pd.DataFrame, output_path: str) -> None:
    """
    Write the day-by-year table to an Excel workbook with a line chart.

    Args:
        table: DataFrame indexed by day, one column per year
        output_path: Path to save the .xlsx file
    """
    info(f"Writing Excel file: {output_path}")

    output_dir = os.path.dirname(output_path)
    if output_dir and not os.path.exists(output_dir):
        os.makedirs(output_dir)

    workbook = xlsxwriter.Workbook(output_path)
    worksheet = workbook.add_worksheet(SHEET_NAME)

    header_format = get_header_format(workbook)
    default_format, alt_format = get_row_formats(workbook)

    worksheet.write(0, 0, 'day', header_format)
    for col_idx, year in enumerate(table.columns, start=1):
        worksheet.write(0, col_idx, int(year), header_format)

    for row_idx, (day, row) in enumerate(zip(table.index, table.itertuples(index=False)), start=1):
        row_format = alt_format if row_idx % 2 == 0 else default_format
        worksheet.write(row_idx, 0, int(day), row_format)
        for col_idx, value in enumerate(row, start=1):
            worksheet.write(row_idx, col_idx, int(value), row_format)

    worksheet.freeze_panes(1, 1)
    worksheet.set_column(0, len(table.columns), 10)

    last_row = len(table.index)
    if last_row:
        chart = workbook.add_chart({'type': 'line'})
        for col_idx in range(1, len(table.columns) + 1):
            chart.add_series({
                'name': [SHEET_NAME, 0, col_idx],
                'categories': [SHEET_NAME, 1, 0, last_row, 0],
                'values': [SHEET_NAME, 1, col_idx, last_row, col_idx],
            })
        chart.set_title({'name': 'Average top finish time'})
        chart.set_x_axis({'name': 'Day'})
        chart.set_y_axis({'name': 'Seconds'})
        chart.set_size({'width': 960, 'height': 480})
        worksheet.insert_chart(1, len(table.columns) + 2, chart)

    workbook.close()
    info(f"Excel file saved: {output_path}")
