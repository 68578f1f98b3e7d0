"""Default configuration values for wdym."""

from .config import WdymConfig


def create_default_config(**overrides) -> WdymConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        WdymConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            request_timeout=5.0,
            log_level="debug"
        )
    """
    return WdymConfig(**overrides)
