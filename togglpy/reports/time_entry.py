"""TimeEntry and Project classes for representing Toggl Track data."""
from datetime import datetime, timezone
from typing import Optional, Dict, Any, Tuple

from ..errors import DecodeError
from ..utils.format_utils import parse_hex_color

def _require_int(data: Dict[str, Any], key: str, optional: bool = False) -> Optional[int]:
    value = data.get(key)
    if value is None and optional:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Expected integer '{key}', got {value!r}")
    return value

def _parse_timestamp(value: Any) -> datetime:
    if not isinstance(value, str):
        raise DecodeError(f"Expected ISO timestamp, got {value!r}")
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise DecodeError(f"Invalid timestamp {value!r}: {e}") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt

class TimeEntry:
    """Class representing a Toggl time entry."""

    def __init__(self, entry_data: Dict[str, Any]):
        """Initialize a TimeEntry.

        Args:
            entry_data: Raw entry data from the Toggl API

        Raises:
            DecodeError: If the entry does not have the expected fields
        """
        if not isinstance(entry_data, dict):
            raise DecodeError(f"Expected time entry object, got {type(entry_data).__name__}")

        description = entry_data.get("description")
        if description is not None and not isinstance(description, str):
            raise DecodeError(f"Expected string 'description', got {description!r}")
        self.description = description or ""
        self.workspace_id = _require_int(entry_data, "workspace_id")
        self.project_id = _require_int(entry_data, "project_id", optional=True)
        self.duration_sec = _require_int(entry_data, "duration")

        # Only running entries need the start time
        start = entry_data.get("start")
        if start is None:
            if self.duration_sec < 0:
                raise DecodeError("Running time entry has no 'start'")
            self.start = None
        else:
            self.start = _parse_timestamp(start)

    @property
    def is_running(self) -> bool:
        return self.duration_sec < 0

    @property
    def group_key(self) -> Tuple[int, Optional[int]]:
        return self.workspace_id, self.project_id

    def effective_duration(self, now: Optional[datetime] = None) -> int:
        """Get the tracked duration in seconds.

        Running entries count the time elapsed since they started.

        Args:
            now: Current time (defaults to the system clock)

        Returns:
            Duration in seconds
        """
        if not self.is_running:
            return self.duration_sec
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            # Naive times are local
            now = now.astimezone()
        return max(int((now - self.start).total_seconds()), 0)

    def __repr__(self) -> str:
        return (f"TimeEntry(description={self.description!r}, workspace_id={self.workspace_id}, "
                f"project_id={self.project_id}, duration={self.duration_sec})")

class Project:
    """Display data for a Toggl project."""

    def __init__(self, name: str, color: Tuple[int, int, int, int]):
        self.name = name
        self.color = color

    @classmethod
    def from_api(cls, project_data: Dict[str, Any]) -> "Project":
        """Build a Project from the Toggl project JSON.

        Raises:
            DecodeError: If name or color are missing or malformed
        """
        if not isinstance(project_data, dict):
            raise DecodeError(f"Expected project object, got {type(project_data).__name__}")
        name = project_data.get("name")
        if not isinstance(name, str):
            raise DecodeError(f"Expected string 'name', got {name!r}")
        try:
            color = parse_hex_color(project_data.get("color"))
        except ValueError as e:
            raise DecodeError(str(e)) from e
        return cls(name, color)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.color[:3]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return (self.name, self.color) == (other.name, other.color)

    def __hash__(self) -> int:
        return hash((self.name, self.color))

    def __repr__(self) -> str:
        return f"Project(name={self.name!r}, color={self.color})"

NO_PROJECT = Project("(no project)", (0x7f, 0x7f, 0x7f, 0xff))
