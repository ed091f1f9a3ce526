"""Handles a single page load and its timing."""
import time
import logging

from playwright.async_api import BrowserContext

from src.shared.config import Config
from .constants import PageLoadConstants
from .exceptions import MetricsCollectionError
from .metrics_collector import WebVitalsCollector
from .models import Sample, WebVitals


# Configure logging
logger = logging.getLogger(__name__)


class IterationRunner:
    """Handles a single page load and its timing."""

    def __init__(self, config: Config, collector: WebVitalsCollector):
        self.config = config
        self.collector = collector

    async def run_iteration(self, context: BrowserContext, session_id: int, iteration: int) -> Sample:
        """
        Open a page, navigate to the target URL and measure it.

        Args:
            context: Browsing context owned by the session.
            session_id: 1-based session identifier.
            iteration: 1-based iteration index within the session.

        Returns:
            Sample for this iteration. Metric fields stay 0 when collection is
            disabled or fails.
        """
        page = await context.new_page()
        try:
            start_time = time.perf_counter()
            await page.goto(self.config.target_url, wait_until=PageLoadConstants.WAIT_UNTIL)
            end_time = time.perf_counter()
            load_time = (end_time - start_time) * 1000

            vitals = WebVitals.zero()
            if self.config.collect_metrics:
                try:
                    vitals = await self.collector.collect(page)
                except MetricsCollectionError as e:
                    logger.error(f"Failed to collect web vitals for session #{session_id}, iteration #{iteration}: {e}")

            sample = Sample(
                session_id=session_id,
                iteration=iteration,
                load_time=load_time,
                timestamp=int(time.time() * 1000),
                dom_content_loaded=vitals.dom_content_loaded,
                largest_contentful_paint=vitals.lcp,
                first_contentful_paint=vitals.fcp,
                time_to_interactive=vitals.tti,
            )
            logger.info(
                f"Session #{session_id}, Iteration #{iteration}: "
                f"Load time = {load_time:.0f}ms, LCP = {vitals.lcp:.2f}ms"
            )
            return sample
        finally:
            await page.close()
