"""
togglPy: A CLI tool for summarising Toggl Track time entries by project.

- Fetches time entries from the Toggl Track API for a date range
- Groups them by workspace and project and totals their durations
- Exports the summary to CSV and Markdown
- Can be used as a CLI (via `python -m togglpy` or `togglpy` if installed as a package)
"""

__version__ = "0.1.0"
