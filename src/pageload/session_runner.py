"""Runs the iterations of one simulated user session."""
import asyncio
import logging
from typing import List

from playwright.async_api import BrowserType, Error as PlaywrightError, Route

from src.shared.config import Config
from .constants import PageLoadConstants
from .exceptions import SessionExecutionError
from .iteration_runner import IterationRunner
from .models import Sample


# Configure logging
logger = logging.getLogger(__name__)


class SessionRunner:
    """Runs one browsing context through a fixed number of page loads."""

    def __init__(self, config: Config, iteration_runner: IterationRunner):
        self.config = config
        self.iteration_runner = iteration_runner

    async def throttle_route(self, route: Route) -> None:
        """Delay every request by the configured latency before continuing it."""
        await asyncio.sleep(self.config.throttling.latency_ms / 1000)
        await route.continue_()

    async def run_session(self, browser_type: BrowserType, session_id: int) -> List[Sample]:
        """
        Launch a browser and run every iteration of a session sequentially.

        Args:
            browser_type: Playwright browser type used to launch the browser.
            session_id: 1-based session identifier.

        Returns:
            The session's samples in iteration order.

        Raises:
            SessionExecutionError: If the browser, the context or a navigation fails.
        """
        logger.info(f"Starting session #{session_id}")
        samples = []

        try:
            browser = await browser_type.launch(headless=self.config.headless)
        except PlaywrightError as e:
            logger.error(f"Browser launch failed for session #{session_id}: {e}")
            raise SessionExecutionError(f"Unable to launch browser for session #{session_id}") from e

        try:
            context = await browser.new_context(
                viewport=PageLoadConstants.VIEWPORT,
                user_agent=PageLoadConstants.USER_AGENT,
            )
            try:
                if self.config.throttling.enabled:
                    logger.debug(f"Throttling session #{session_id} with {self.config.throttling.latency_ms}ms latency")
                    await context.route(PageLoadConstants.ROUTE_PATTERN, self.throttle_route)

                iterations = self.config.iterations_per_session
                for i in range(iterations):
                    sample = await self.iteration_runner.run_iteration(context, session_id, i + 1)
                    samples.append(sample)

                    # Short pause between iterations, none after the last
                    if i < iterations - 1:
                        await asyncio.sleep(PageLoadConstants.ITERATION_PAUSE_SECONDS)
            finally:
                await context.close()
        except PlaywrightError as e:
            logger.error(f"Session #{session_id} failed: {e}")
            raise SessionExecutionError(f"Session #{session_id} failed") from e
        finally:
            await browser.close()

        return samples
