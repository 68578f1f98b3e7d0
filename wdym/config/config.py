"""Configuration classes for wdym."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class WdymConfig:
    """Immutable application settings.

    Separate from SearchConfig: this holds how the tool talks to providers
    and the terminal, SearchConfig holds what the user asked for.
    """

    # Google Translate settings
    google_translate_url: str = "https://clients5.google.com/translate_a/single"
    google_translate_client: str = "dict-chrome-ex"

    # Jisho settings
    jisho_api_url: str = "https://jisho.org/api/v1/search/words"
    jisho_max_entries: int = 5

    # Network settings
    request_timeout: float | None = None  # Seconds; None waits indefinitely

    # Logging settings
    log_file: Path | None = None
    log_level: str = "WARNING"

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.log_file, str):
            object.__setattr__(self, "log_file", Path(self.log_file) if self.log_file else None)
        object.__setattr__(self, "log_level", self.log_level.upper())
