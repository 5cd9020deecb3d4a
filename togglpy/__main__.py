"""Main module for the togglPy package."""
import os
import sys
import argparse
from typing import Optional, List
from dotenv import load_dotenv, find_dotenv

from .api.client import TogglClient, DEFAULT_BASE_URL
from .errors import TogglPyError, ConfigError
from .reports.summary import run_summary, summary_table, SUMMARY_HEADERS
from .utils.date_utils import parse_human_date, resolve_date_range
from .utils.format_utils import TimeResolution, resolution_choices
from .utils.file_utils import write_csv, write_markdown

# --- Environment Setup ---
def load_environment():
    """Load environment variables from togglpy.env and/or a .env file, if present."""
    env_file = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'togglpy.env')
    if os.path.exists(env_file):
        load_dotenv(env_file)
    load_dotenv(find_dotenv(usecwd=True))

def get_env_var(key: str) -> str:
    """Get an environment variable.

    Args:
        key: Environment variable name

    Returns:
        Environment variable value

    Raises:
        ConfigError: If the environment variable is not set
    """
    value = os.getenv(key)
    if not value:
        raise ConfigError(f"Set {key} in your environment, a .env file or togglpy.env.")
    return value

def make_client() -> TogglClient:
    """Create a client from the environment settings."""
    api_token = get_env_var("TOGGL_API_TOKEN")
    return TogglClient(api_token, base_url=os.getenv("TOGGL_API_URL") or DEFAULT_BASE_URL)

# --- CLI Logic ---
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Print a per-project summary of Toggl Track time entries.",
        epilog="""
Examples:
    # Summary for today
  togglpy
    ---
    # Summary for yesterday, to the second
  togglpy --start yesterday -t s
    ---
    # Summary for a week, also exported to markdown
  togglpy --start "3 days ago" --end tomorrow --md week.md
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="togglpy"
    )
    parser.add_argument('-l', '--list', action='store_true', help='List user and workspaces with their IDs')
    parser.add_argument('-s', '--start', help='Start date, e.g. "yesterday" or 25/12/2023 [default: today]')
    parser.add_argument('-e', '--end', help='End date, exclusive [default: start + 1 day]')
    parser.add_argument('-t', '--time-resolution', choices=resolution_choices(), default=TimeResolution.MINUTES.value,
                        help='Duration granularity; minutes are rounded to the nearest minute (default: minutes)')
    parser.add_argument('--csv', help='Export the summary table to the given CSV file')
    parser.add_argument('--md', help='Export the summary table as markdown to the given file path')
    parser.add_argument('--overwrite', action='store_true', help='Overwrite the markdown file if it exists')
    return parser.parse_args(argv)

def list_user_and_workspaces() -> None:
    """List user information and workspaces."""
    client = make_client()
    user = client.fetch_me()
    workspaces = client.fetch_workspaces()

    print("\nUser Info:")
    print(f"  Name: {user.get('fullname')}")
    print(f"  Email: {user.get('email')}")
    print(f"  ID: {user.get('id')}")

    print("\nWorkspaces:")
    for ws in workspaces:
        print(f"  Name: {ws.get('name')}, ID: {ws.get('id')}")

def summary_interface(start_str: Optional[str] = None, end_str: Optional[str] = None,
                      resolution: TimeResolution = TimeResolution.MINUTES, csv_path: Optional[str] = None,
                      md_path: Optional[str] = None, overwrite: bool = False) -> None:
    """Main interface for the summary report.

    Args:
        start_str: Start date expression
        end_str: End date expression
        resolution: Duration granularity
        csv_path: Path to export CSV
        md_path: Path to export markdown
        overwrite: Whether to overwrite existing markdown file
    """
    # Dates and credentials are checked before anything goes over the network
    start_date = parse_human_date(start_str) if start_str else None
    end_date = parse_human_date(end_str) if end_str else None
    start_date, end_date = resolve_date_range(start_date, end_date)
    client = make_client()

    generator = run_summary(client, start_date, end_date, resolution)

    if csv_path:
        write_csv(csv_path, SUMMARY_HEADERS, summary_table(generator.rows, resolution))
        print(f"[SUCCESS] CSV output written to '{csv_path}'")
    if md_path:
        write_markdown(md_path, generator.to_markdown(start_date, end_date), start_date, end_date, overwrite)
        print(f"[SUCCESS] Markdown output written to '{md_path}'")

def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    load_environment()
    args = parse_args(argv)

    try:
        if args.list:
            list_user_and_workspaces()
        else:
            summary_interface(
                args.start, args.end, TimeResolution.parse(args.time_resolution),
                args.csv, args.md, args.overwrite
            )
    except TogglPyError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
