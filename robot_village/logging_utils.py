"""Console output for robot moves.

Each kind of move event gets its own color and text marker, so a run can be
followed at a glance with or without color support.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Robot drove along a road
    GREEN = "\033[92m"     # Parcels dropped off
    CYAN = "\033[96m"      # Move ignored

    BOLD = "\033[1m"
    RESET = "\033[0m"


# Markers per event (color-blind accessible)
MARKER_MOVE = "[>]"
MARKER_DELIVERY = "[✓]"
MARKER_IGNORED = "[-]"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap ``text`` in ANSI codes unless ROBOT_VILLAGE_NO_COLOR is set."""
    if os.getenv("ROBOT_VILLAGE_NO_COLOR"):
        return text

    prefix = Color.BOLD.value + color.value if bold else color.value
    return f"{prefix}{text}{Color.RESET.value}"


def log_move(origin: str, destination: str) -> None:
    print(colored(f"{MARKER_MOVE} Robot moved {origin} -> {destination}", Color.BLUE))


def log_delivery(place: str, delivered: int, remaining: int) -> None:
    """Report parcels dropped off at ``place`` and how many are still on the map."""
    print(
        colored(
            f"{MARKER_DELIVERY} Delivered {delivered} parcel(s) at {place}, {remaining} left",
            Color.GREEN,
            bold=remaining == 0,
        )
    )


def log_ignored_move(origin: str, destination: str) -> None:
    print(colored(f"{MARKER_IGNORED} No road from {origin} to {destination}; staying put", Color.CYAN))
