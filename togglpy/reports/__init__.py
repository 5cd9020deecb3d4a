"""Report generation modules for togglPy."""

from .time_entry import TimeEntry, Project, NO_PROJECT
from .summary import SummaryGenerator, SummaryRow, run_summary

__all__ = ['TimeEntry', 'Project', 'NO_PROJECT', 'SummaryGenerator', 'SummaryRow', 'run_summary']
