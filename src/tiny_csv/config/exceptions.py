"""Configuration-related exceptions for tiny_csv."""


class ConfigError(Exception):
    """Base exception for configuration-related errors."""

    def __init__(self, message: str, config_key: str = None) -> None:
        """Initialize ConfigError.

        Args:
            message: Error message.
            config_key: Optional key related to the configuration error.
        """
        super().__init__(message)
        self.config_key = config_key


class ConfigValidationError(ConfigError):
    """Exception raised when a configuration value is invalid."""

    def __init__(self, message: str, config_key: str = None, invalid_keys: list[str] = None) -> None:
        """Initialize ConfigValidationError.

        Args:
            message: Error message.
            config_key: Optional key related to the configuration error.
            invalid_keys: List of configuration keys holding invalid values.
        """
        super().__init__(message, config_key)
        self.invalid_keys = invalid_keys or ([config_key] if config_key else [])


class DirectoryValidationError(ConfigError):
    """Exception raised when directory validation fails."""

    def __init__(self, message: str, directory_path: str, config_key: str = None) -> None:
        """Initialize DirectoryValidationError.

        Args:
            message: Error message.
            directory_path: Path to the directory that failed validation.
            config_key: Configuration key related to the directory.
        """
        super().__init__(message, config_key)
        self.directory_path = directory_path
