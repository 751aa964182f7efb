"""
Chart page generator.

Embeds the stats table as JSON in a standalone HTML page that plots one line
per year with D3.
"""

import os
import json
from datetime import datetime

import pandas as pd

from .templates import get_css, get_javascript, get_page
from ..processors.stats_processor import stats_records, table_years
from ..utils.constants import D3_CDN_URL
from ..utils.log import info


def serialize_table(table: pd.DataFrame) -> str:
    """Serialize the table for the chart script."""
    data = {
        'years': table_years(table),
        'rows': stats_records(table),
    }
    return json.dumps(data)


def generate_chart_html(table: pd.DataFrame, output_path: str) -> None:
    """
    Generate the chart page for a stats table.

    Args:
        table: DataFrame indexed by day, one column per year
        output_path: Path to save the HTML file
    """
    info(f"Generating chart: {output_path}")

    generated_time = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    html_content = get_page(get_css(), get_javascript(serialize_table(table)), D3_CDN_URL, generated_time)

    output_dir = os.path.dirname(output_path)
    if output_dir and not os.path.exists(output_dir):
        os.makedirs(output_dir)

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(html_content)

    info(f"Chart saved: {output_path}")
