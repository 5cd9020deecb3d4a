"""SummaryGenerator: groups time entries by workspace and project."""
from datetime import date, datetime
from itertools import groupby
from typing import List, Optional, Tuple, NamedTuple

from rich.console import Console
from rich.text import Text
from tabulate import tabulate

from .time_entry import TimeEntry, Project, NO_PROJECT
from ..utils.date_utils import day_str, resolve_date_range
from ..utils.format_utils import TimeResolution, format_duration

PROJECT_COLUMN_WIDTH = 20
SUMMARY_HEADERS = ["Duration", "Project", "Descriptions"]

class SummaryRow(NamedTuple):
    """One output line: the totals of a (workspace, project) group."""
    workspace_id: int
    project_id: Optional[int]
    project: Project
    duration_sec: int
    descriptions: List[str]

def group_sort_key(entry: TimeEntry) -> Tuple[int, bool, int]:
    # Entries without a project come first within their workspace
    return entry.workspace_id, entry.project_id is not None, entry.project_id or 0

def group_entries(entries: List[TimeEntry]) -> List[Tuple[Tuple[int, Optional[int]], List[TimeEntry]]]:
    """Partition entries by (workspace_id, project_id).

    Args:
        entries: Time entries in any order

    Returns:
        List of (group key, entries) ordered by workspace then project
    """
    ordered = sorted(entries, key=group_sort_key)
    return [(key, list(members)) for key, members in groupby(ordered, key=lambda e: e.group_key)]

def unique_descriptions(entries: List[TimeEntry]) -> List[str]:
    """Sorted, de-duplicated, non-empty descriptions of a group."""
    return sorted({e.description for e in entries if e.description})

def format_row(row: SummaryRow, resolution: TimeResolution = TimeResolution.MINUTES) -> Text:
    """Render a summary row as a styled line.

    Args:
        row: Summary row
        resolution: Duration display granularity

    Returns:
        "<duration> <project> <descriptions>" with the project in its color
    """
    r, g, b = row.project.rgb
    return Text.assemble(
        (format_duration(row.duration_sec, resolution), "bright_black"),
        " ",
        (row.project.name.ljust(PROJECT_COLUMN_WIDTH), f"rgb({r},{g},{b})"),
        " ",
        ", ".join(row.descriptions),
    )

def summary_table(rows: List[SummaryRow], resolution: TimeResolution = TimeResolution.MINUTES) -> List[List[str]]:
    """Convert summary rows to plain table rows (see SUMMARY_HEADERS)."""
    return [
        [format_duration(row.duration_sec, resolution), row.project.name, ", ".join(row.descriptions)]
        for row in rows
    ]

class SummaryGenerator:
    """Class for generating the per-project summary of a date range."""

    def __init__(self, entries: List[TimeEntry], client, resolution: TimeResolution = TimeResolution.MINUTES,
                 now: Optional[datetime] = None):
        """Initialize a SummaryGenerator.

        Args:
            entries: List of TimeEntry objects
            client: TogglClient used to resolve project names
            resolution: Duration display granularity
            now: Current time, used for running entries (optional)
        """
        self.entries = entries
        self.client = client
        self.resolution = resolution
        self.now = now
        self.groups = group_entries(entries)
        self.rows: List[SummaryRow] = []

    def resolve_project(self, workspace_id: int, project_id: Optional[int]) -> Project:
        if project_id is None:
            return NO_PROJECT
        return self.client.fetch_project(workspace_id, project_id)

    def iter_rows(self):
        """Yield one SummaryRow per group, resolving projects one at a time."""
        for (workspace_id, project_id), members in self.groups:
            total = sum(e.effective_duration(self.now) for e in members)
            project = self.resolve_project(workspace_id, project_id)
            yield SummaryRow(workspace_id, project_id, project, total, unique_descriptions(members))

    def generate_summary(self, console: Optional[Console] = None) -> List[SummaryRow]:
        """Print each group's line as soon as it is known.

        Args:
            console: Output console (defaults to stdout)

        Returns:
            The printed rows
        """
        console = console or Console(highlight=False, soft_wrap=True)
        self.rows = []
        for row in self.iter_rows():
            console.print(format_row(row, self.resolution))
            self.rows.append(row)
        return self.rows

    def to_markdown(self, start_date: date, end_date: date) -> str:
        """Render the generated rows as a Markdown section."""
        table = tabulate(summary_table(self.rows, self.resolution), headers=SUMMARY_HEADERS, tablefmt="github")
        return f"\n### Summary {day_str(start_date)} to {day_str(end_date)}:\n{table}\n"

def run_summary(client, start_date: Optional[date] = None, end_date: Optional[date] = None,
                resolution: TimeResolution = TimeResolution.MINUTES, console: Optional[Console] = None,
                now: Optional[datetime] = None) -> SummaryGenerator:
    """Fetch, aggregate and print the summary for a date range.

    Args:
        client: TogglClient
        start_date: First day (defaults to today)
        end_date: First day excluded (defaults to start_date + 1 day)
        resolution: Duration display granularity
        console: Output console (defaults to stdout)
        now: Current time (optional)

    Returns:
        The SummaryGenerator holding the printed rows
    """
    today = now.astimezone().date() if now else None
    start_date, end_date = resolve_date_range(start_date, end_date, today=today)
    entries = client.fetch_time_entries(start_date, end_date)
    generator = SummaryGenerator(entries, client, resolution, now=now)
    generator.generate_summary(console)
    return generator
