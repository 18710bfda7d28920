"""Custom exception types for the release dashboard."""


class ReleaseDashboardError(Exception):
    """Base exception for all expected release dashboard failures."""


class ConfigurationError(ReleaseDashboardError):
    """Raised when the project configuration file is missing or invalid."""


class FetchError(ReleaseDashboardError):
    """Raised when the GitHub CLI invocation fails or returns an unexpected payload."""


class CacheError(ReleaseDashboardError):
    """Raised when a cached release file cannot be read back."""


class DataValidationError(ReleaseDashboardError):
    """Raised when a pull request record or cached row does not meet expected constraints."""
