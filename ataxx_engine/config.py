"""
Engine configuration for console sessions.
"""

from dataclasses import dataclass, field
from pathlib import Path

PLAYER_KINDS = ("manual", "auto")


def _default_log_file() -> Path:
    return Path.home() / ".ataxx" / "engine.log"


@dataclass
class EngineConfig:
    """Configuration for a game session.

    Collects the search depth, who controls each side and where the
    session log goes, so the driver and tools share one place for them.
    """

    # Search
    search_depth: int = 4
    """Plies searched by automated players"""

    # Players
    red_player: str = "manual"
    """Who plays Red at the start of a session: 'manual' or 'auto'"""

    blue_player: str = "auto"
    """Who plays Blue at the start of a session: 'manual' or 'auto'"""

    # Logging
    log_file: Path = field(default_factory=_default_log_file)
    """Session log file"""

    debug: bool = False
    """Log at DEBUG level instead of INFO"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.log_file = Path(self.log_file).expanduser()
        self.red_player = self.red_player.lower()
        self.blue_player = self.blue_player.lower()

        if self.search_depth < 1:
            raise ValueError(f"search_depth must be at least 1, got {self.search_depth}")

        if self.red_player not in PLAYER_KINDS:
            raise ValueError(
                f"red_player should be one of {PLAYER_KINDS}, got {self.red_player!r}"
            )

        if self.blue_player not in PLAYER_KINDS:
            raise ValueError(
                f"blue_player should be one of {PLAYER_KINDS}, got {self.blue_player!r}"
            )

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"EngineConfig(\n"
            f"  Search depth: {self.search_depth}\n"
            f"  Players: red={self.red_player}, blue={self.blue_player}\n"
            f"  Log: {self.log_file} ({'DEBUG' if self.debug else 'INFO'})\n"
            f")"
        )
