"""
Robot Village Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os

from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


def env_flag(name: str, default: str = "") -> bool:
    """Read a boolean flag from the environment.

    Only the spellings in ``_TRUE_VALUES`` turn a flag on; anything else,
    including unrecognised values, reads as off. ``Config.validate`` reports
    unrecognised values.
    """
    return os.getenv(name, default).strip().lower() in _TRUE_VALUES


class Config:
    """Application configuration loaded from environment variables."""

    # Raw flag as read from the environment, kept for validation
    LOG_MOVES_RAW: str = os.getenv("ROBOT_VILLAGE_LOG_MOVES", "")

    # Print a line for every move, delivery and ignored move
    LOG_MOVES: bool = env_flag("ROBOT_VILLAGE_LOG_MOVES")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors on unrecognised values."""
        value = cls.LOG_MOVES_RAW.strip().lower()
        if value not in _TRUE_VALUES | _FALSE_VALUES:
            raise ValueError(
                f"ROBOT_VILLAGE_LOG_MOVES must be a boolean flag (1/0, true/false, yes/no, on/off), "
                f"got {cls.LOG_MOVES_RAW!r}"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Robot Village Configuration:",
            f"  Log Moves: {cls.LOG_MOVES}",
            f"  Colors: {'off' if os.getenv('ROBOT_VILLAGE_NO_COLOR') else 'on'}",
        ]
        return "\n".join(lines)
