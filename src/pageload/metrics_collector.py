"""Collects web vitals from a loaded page."""
import logging

from playwright.async_api import Error as PlaywrightError, Page

from .constants import PageLoadConstants
from .exceptions import MetricsCollectionError
from .models import WebVitals


# Configure logging
logger = logging.getLogger(__name__)


# Resolves once FCP and LCP are both known, or after timeoutMs with whatever
# has been observed so far.
WEB_VITALS_SCRIPT = """
(timeoutMs) => new Promise((resolve) => {
  let lcpDone = false;
  let fcpDone = false;

  const navEntry = performance.getEntriesByType('navigation')[0];
  const domContentLoaded = navEntry
    ? navEntry.domContentLoadedEventEnd - navEntry.startTime
    : 0;

  let fcp = 0;
  const fcpEntry = performance.getEntriesByName('first-contentful-paint');
  if (fcpEntry.length > 0) {
    fcp = fcpEntry[0].startTime;
    fcpDone = true;
  }

  let lcp = 0;
  let tti = performance.now();

  const checkAllDone = () => {
    if (lcpDone && fcpDone) {
      resolve({ domContentLoaded, lcp, fcp, tti });
    }
  };

  new PerformanceObserver((entryList) => {
    const entries = entryList.getEntries();
    const lastEntry = entries[entries.length - 1];
    lcp = lastEntry.startTime;
    lcpDone = true;
    checkAllDone();
  }).observe({ type: 'largest-contentful-paint', buffered: true });

  new PerformanceObserver((entryList) => {
    const entries = entryList.getEntries();
    if (entries.length > 0) {
      tti = entries[0].startTime;
    }
    checkAllDone();
  }).observe({ type: 'first-input', buffered: true });

  setTimeout(() => {
    resolve({ domContentLoaded, lcp: lcp || 0, fcp: fcp || 0, tti: tti || 0 });
  }, timeoutMs);
})
"""


class WebVitalsCollector:
    """Reads navigation and paint timings through the page's performance API."""

    def __init__(self, timeout_ms: int = PageLoadConstants.METRICS_TIMEOUT_MS):
        self.timeout_ms = timeout_ms

    async def collect(self, page: Page) -> WebVitals:
        """
        Collect DOM content loaded, FCP, LCP and a TTI approximation.

        The TTI value is the first input entry when one exists, otherwise the
        time elapsed between navigation start and the start of collection.

        Args:
            page: A page that has finished navigating.

        Returns:
            WebVitals in milliseconds relative to navigation start.

        Raises:
            MetricsCollectionError: If the evaluation fails, e.g. the page
                navigated away or was closed.
        """
        try:
            data = await page.evaluate(WEB_VITALS_SCRIPT, self.timeout_ms)
        except PlaywrightError as e:
            raise MetricsCollectionError(f"Unable to collect web vitals: {e}") from e

        if not isinstance(data, dict):
            raise MetricsCollectionError(f"Unexpected web vitals payload: {data!r}")

        return WebVitals.from_dict(data)
