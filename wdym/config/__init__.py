"""Configuration management for wdym."""

from .config import WdymConfig
from .defaults import create_default_config

__all__ = ["WdymConfig", "create_default_config"]
