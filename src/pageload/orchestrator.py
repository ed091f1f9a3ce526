"""Runs simulated user sessions one after another."""
import asyncio
import logging
from typing import List

from playwright.async_api import async_playwright

from src.shared.config import Config
from .models import Sample
from .session_runner import SessionRunner


# Configure logging
logger = logging.getLogger(__name__)


class LoadOrchestrator:
    """Runs sessions strictly sequentially and gathers their samples."""

    def __init__(self, config: Config, session_runner: SessionRunner):
        self.config = config
        self.session_runner = session_runner

    async def run(self) -> List[Sample]:
        """
        Run sessions 1..N with the configured delay between session starts.

        Returns:
            All samples ordered by session, then iteration.
        """
        all_samples = []
        sessions = self.config.sessions

        async with async_playwright() as playwright:
            for i in range(sessions):
                session_samples = await self.session_runner.run_session(playwright.chromium, i + 1)
                all_samples.extend(session_samples)
                logger.info(f"Session #{i + 1} finished with {len(session_samples)} samples")

                # Delay between session starts, none after the last
                if i < sessions - 1:
                    await asyncio.sleep(self.config.delay_between_sessions_ms / 1000)

        return all_samples
