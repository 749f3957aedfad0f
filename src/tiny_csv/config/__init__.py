"""Configuration management for tiny_csv.

This package provides configuration loading from environment variables and
.env files, validation of parsing options, and the related error types.
"""

from .exceptions import ConfigError, ConfigValidationError, DirectoryValidationError
from .settings import Settings
from .validation import ConfigValidator

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "DirectoryValidationError",
    "Settings",
    "ConfigValidator",
]
