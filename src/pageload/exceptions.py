"""Custom exceptions for the page load tester."""


class MetricsCollectionError(Exception):
    """Exception raised when web vitals cannot be read from a page."""
    pass


class SessionExecutionError(Exception):
    """Custom exception for browser session failures."""
    pass


class ReportLoadError(Exception):
    """Exception raised when a saved report cannot be loaded."""
    pass
