"""Infrastructure configuration module."""

from .app_config import Config
from .dumpspace_config import DEFAULT_CONFIG, get_config

__all__ = ["Config", "DEFAULT_CONFIG", "get_config"]
