"""Exception classes for the Vultr command-line client.

Every error that should end a command with a message and a non-zero
exit status derives from CLIError.
"""


class CLIError(Exception):
    """Custom exception for CLI-related errors."""

    pass


class ConfigurationError(CLIError):
    """Raised when required settings (such as the API key) are missing."""

    pass


class VultrAPIError(CLIError):
    """Raised when a call through the Vultr API client fails."""

    def __init__(self, action: str, message: str):
        self.action = action
        super().__init__(f"{action} failed: {message}")
