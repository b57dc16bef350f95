from .config import ConfigManager
from .logger import setup_logger
from .exceptions import CLIError, ConfigurationError, VultrAPIError

__all__ = [
    "ConfigManager",
    "setup_logger",
    "CLIError",
    "ConfigurationError",
    "VultrAPIError",
]
