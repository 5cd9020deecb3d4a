"""Formatting utility functions for togglPy."""
import re
from enum import Enum
from typing import Tuple

class TimeResolution(Enum):
    """Display granularity for durations."""
    MINUTES = "minutes"
    SECONDS = "seconds"

    @classmethod
    def parse(cls, text: str) -> "TimeResolution":
        """Parse a resolution name or one of its short aliases.

        Args:
            text: e.g. "minutes", "min", "m", "seconds", "sec", "s"

        Returns:
            Matching TimeResolution

        Raises:
            ValueError: If the text names no resolution
        """
        key = text.strip().lower()
        for resolution, aliases in RESOLUTION_ALIASES.items():
            if key == resolution.value or key in aliases:
                return resolution
        raise ValueError(f"Unknown time resolution '{text}'")

    def __str__(self) -> str:
        return self.value

RESOLUTION_ALIASES = {
    TimeResolution.MINUTES: ("m", "min", "mins"),
    TimeResolution.SECONDS: ("s", "sec", "secs"),
}

def resolution_choices() -> list:
    """All accepted resolution names, aliases included."""
    choices = []
    for resolution, aliases in RESOLUTION_ALIASES.items():
        choices.append(resolution.value)
        choices.extend(aliases)
    return choices

def format_duration(seconds: int, resolution: TimeResolution = TimeResolution.MINUTES) -> str:
    """Format a duration as a clock string.

    Minute resolution rounds to the nearest minute (half a minute rounds up).

    Args:
        seconds: Duration in seconds (negative values display as zero)
        resolution: Display granularity

    Returns:
        HH:MM or HH:MM:SS
    """
    total = max(int(seconds), 0)
    if resolution is TimeResolution.SECONDS:
        return f"{total // 3600:02}:{(total // 60) % 60:02}:{total % 60:02}"

    minutes = total // 60
    if total % 60 >= 30:
        minutes += 1
    h, m = divmod(minutes, 60)
    return f"{h:02}:{m:02}"

HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

def parse_hex_color(text: str) -> Tuple[int, int, int, int]:
    """Parse a hex color such as "#3366ff".

    Args:
        text: "#rgb", "#rgba", "#rrggbb" or "#rrggbbaa"

    Returns:
        (r, g, b, a) tuple, alpha defaulting to 255

    Raises:
        ValueError: If the text is not a hex color
    """
    match = HEX_COLOR_RE.match(text.strip()) if isinstance(text, str) else None
    if not match:
        raise ValueError(f"Invalid hex color {text!r}")

    digits = match.group(1)
    if len(digits) <= 4:
        digits = "".join(c * 2 for c in digits)
    if len(digits) == 6:
        digits += "ff"
    r, g, b, a = (int(digits[i:i + 2], 16) for i in range(0, 8, 2))
    return r, g, b, a
