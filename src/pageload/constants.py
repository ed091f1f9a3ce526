"""Constants for the page load tester."""


class PageLoadConstants:
    """Centralized constants for browser sessions and result files."""
    VIEWPORT = {"width": 1280, "height": 720}
    USER_AGENT = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )
    WAIT_UNTIL = "networkidle"
    ROUTE_PATTERN = "**/*"
    METRICS_TIMEOUT_MS = 5000
    ITERATION_PAUSE_SECONDS = 1.0
    RESULT_FILE_PREFIX = "perf-test-"
