"""File I/O utility functions for togglPy."""
import os
import csv
import markdown
from datetime import date

from ..errors import ExportError
from .date_utils import day_str

def write_csv(filename: str, headers: list, rows: list):
    """Write data to a CSV file.

    Args:
        filename: Output file name
        headers: Column headers
        rows: Data rows

    Raises:
        ExportError: If the file cannot be written
    """
    try:
        with open(filename, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(headers)
            writer.writerows(rows)
    except OSError as e:
        raise ExportError(f"Failed to write to '{filename}': {e}") from e

def write_markdown(md_path: str, content: str, start_date: date, end_date: date, overwrite: bool = False):
    """Write content to a Markdown file.

    Args:
        md_path: Output file path
        content: Markdown content
        start_date: Start date for the title
        end_date: End date for the title
        overwrite: Whether to overwrite the file if it exists

    Raises:
        ExportError: If the file cannot be written or does not render
    """
    file_exists = os.path.exists(md_path)
    if file_exists and not overwrite:
        mode = 'a'
        print(f"[INFO] File '{md_path}' exists. Appending output.")
    elif file_exists and overwrite:
        mode = 'w'
        print(f"[INFO] File '{md_path}' exists. Overwriting as requested.")
    else:
        mode = 'w'
        print(f"[INFO] File '{md_path}' does not exist. Creating new file.")

    try:
        with open(md_path, mode, encoding='utf-8') as f:
            if mode == 'w' or os.stat(md_path).st_size == 0:
                f.write(f"# Toggl summary {day_str(start_date)} to {day_str(end_date)}\n\n")
            f.write(content)
    except OSError as e:
        raise ExportError(f"Failed to write to '{md_path}': {e}") from e

    # Rendering to HTML catches content markdown cannot handle
    try:
        with open(md_path, 'r', encoding='utf-8') as f:
            markdown.markdown(f.read())
    except (OSError, ValueError) as e:
        raise ExportError(f"Markdown validation failed for '{md_path}': {e}") from e
