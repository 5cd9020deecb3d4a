"""Utility modules for togglPy."""

from .date_utils import parse_human_date, resolve_date_range, day_str
from .format_utils import TimeResolution, format_duration, parse_hex_color
from .file_utils import write_csv, write_markdown

__all__ = [
    'parse_human_date', 'resolve_date_range', 'day_str',
    'TimeResolution', 'format_duration', 'parse_hex_color',
    'write_csv', 'write_markdown'
]
