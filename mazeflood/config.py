"""
Mazeflood Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Grid limits. Inputs larger than this are rejected by the parser.
    MAZE_MAX_ROWS: int = int(os.getenv("MAZE_MAX_ROWS", "100"))
    MAZE_MAX_COLS: int = int(os.getenv("MAZE_MAX_COLS", "100"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.MAZE_MAX_ROWS <= 0:
            raise ValueError(
                f"MAZE_MAX_ROWS must be positive, got {cls.MAZE_MAX_ROWS}"
            )

        if cls.MAZE_MAX_COLS <= 0:
            raise ValueError(
                f"MAZE_MAX_COLS must be positive, got {cls.MAZE_MAX_COLS}"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Mazeflood Configuration:",
            f"  Max Rows: {cls.MAZE_MAX_ROWS}",
            f"  Max Columns: {cls.MAZE_MAX_COLS}",
            f"  Log Level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
