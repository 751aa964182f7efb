"""Standalone HTML chart output."""

from .generator import generate_chart_html, serialize_table

__all__ = ['generate_chart_html', 'serialize_table']
