"""
Centralized Exception Hierarchy for Hourglass.

All exceptions inherit from HourglassError for easy catching. Each exception
carries:
- error_code: Unique identifier for documentation lookup (e.g., "HG-CMD-001")
- why_it_happened: Explanation of the root cause
- how_to_fix: Actionable steps to resolve the issue

Exception Hierarchy
-------------------
    HourglassError (base)
    ├── ConfigurationError
    │   └── ConfigValidationError
    └── ConfigCommandError
        ├── ArgumentParseError
        └── ConfigSetError

ConfigCommandError and its subclasses wrap an error raised by one of the two
frameworks a config command talks to (click while parsing the command text,
the config model while assigning the value). The original exception is kept
in ``cause`` so the caller can decide whether to report or re-raise it.
"""

from typing import Any, List, Optional


def get_root_cause(exc: BaseException) -> BaseException:
    """Extract the root cause from a chain of exceptions.

    Follows nested __cause__ and __context__ attributes to find
    the original error that started the chain.

    Args:
        exc: Exception to analyze

    Returns:
        Root cause exception (may be the same as input)
    """
    seen = set()
    current = exc

    while current is not None:
        # Avoid infinite loops
        if id(current) in seen:
            break
        seen.add(id(current))

        # Prefer explicit cause over implicit context
        if current.__cause__ is not None:
            current = current.__cause__
        elif current.__context__ is not None:
            current = current.__context__
        else:
            break

    return current


class HourglassError(Exception):
    """
    Base exception for all Hourglass errors.

    Example
    -------
        try:
            config = load_config(path)
        except HourglassError as e:
            logger.error(f"Startup failed: {e}")
            print(f"Fix: {e.how_to_fix}")
    """

    # Default error info - subclasses should override
    error_code: str = "HG-ERR-000"
    why_it_happened: str = "An unexpected error occurred"
    how_to_fix: List[str] = ["Check the error message for details"]

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        why_it_happened: Optional[str] = None,
        how_to_fix: Optional[List[str]] = None,
    ) -> None:
        """Initialize HourglassError with helpful information.

        Args:
            message: Human-readable error message
            error_code: Unique identifier (e.g., "HG-CFG-001")
            why_it_happened: Explanation of root cause
            how_to_fix: List of actionable fix suggestions
        """
        super().__init__(message)

        if error_code is not None:
            self.error_code = error_code
        if why_it_happened is not None:
            self.why_it_happened = why_it_happened
        if how_to_fix is not None:
            self.how_to_fix = how_to_fix

    @property
    def user_message(self) -> str:
        """Get the user-friendly error message."""
        return str(self)

    def get_root_cause(self) -> BaseException:
        """Get the root cause of this exception chain."""
        return get_root_cause(self)


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(HourglassError):
    """
    Raised when the configuration file cannot be read or written.
    """

    error_code = "HG-CFG-000"
    why_it_happened = "The configuration file could not be read or written"
    how_to_fix = [
        "Check that the config path exists and is readable",
        "Set HOURGLASS_CONFIG to point at a different file",
    ]


class ConfigValidationError(ConfigurationError):
    """
    Raised when configuration file content fails validation.

    Attributes
    ----------
    path : str
        The configuration file that failed validation
    """

    error_code = "HG-CFG-001"
    why_it_happened = (
        "A configuration value is invalid. "
        "The hourglass.yaml file may have incorrect settings"
    )
    how_to_fix = [
        "Check hourglass.yaml for syntax errors",
        "Verify the value is within its allowed range",
        "Run 'hourglass config list' to view current settings",
    ]

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


# ============================================================================
# Config Command Exceptions
# ============================================================================


class ConfigCommandError(HourglassError):
    """
    Base exception for a failed config modify command.

    Attributes
    ----------
    identifier : str
        Identifier of the config command entry being modified
    cause : Exception
        The exception raised by the command or config framework
    """

    error_code = "HG-CMD-000"
    why_it_happened = "A config command could not be completed"
    how_to_fix = ["Check the command input and try again"]

    def __init__(self, message: str, identifier: str, cause: Exception) -> None:
        super().__init__(message)
        self.identifier = identifier
        self.cause = cause


class ArgumentParseError(ConfigCommandError):
    """Raised when the command text cannot be parsed into a config value."""

    error_code = "HG-CMD-001"
    why_it_happened = "The value given on the command line has the wrong format"
    how_to_fix = [
        "Check the expected value type with 'hourglass config <key> --help'",
    ]


class ConfigSetError(ConfigCommandError):
    """
    Raised when the config model rejects a parsed value.

    Attributes
    ----------
    value : any
        The parsed value that was rejected
    """

    error_code = "HG-CMD-002"
    why_it_happened = "The value is outside the range allowed for this setting"
    how_to_fix = [
        "Run 'hourglass config list' to view current settings",
        "Pick a value within the allowed range",
    ]

    def __init__(
        self, message: str, identifier: str, cause: Exception, value: Any
    ) -> None:
        super().__init__(message, identifier, cause)
        self.value = value
