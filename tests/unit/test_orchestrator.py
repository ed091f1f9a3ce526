"""Unit tests for the load orchestrator."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.shared.config import Config
from src.pageload.exceptions import SessionExecutionError
from src.pageload.models import Sample
from src.pageload.orchestrator import LoadOrchestrator
from tests.test_const import TEST_URL


def _mock_async_playwright():
    playwright = MagicMock()
    factory = MagicMock()
    factory.return_value.__aenter__.return_value = playwright
    return factory, playwright


def _session_samples(browser_type, session_id):
    return [Sample(session_id=session_id, iteration=i, load_time=1.0, timestamp=i) for i in (1, 2)]


class TestLoadOrchestrator:
    """Test LoadOrchestrator functionality."""

    @pytest.mark.asyncio
    @patch('src.pageload.orchestrator.asyncio.sleep', new_callable=AsyncMock)
    async def test_run_sessions_sequentially(self, mock_sleep):
        """Test sessions 1..N run in order with a delay between session starts only."""
        config = Config(target_url=TEST_URL, sessions=3, iterations_per_session=2, delay_between_sessions_ms=500)
        session_runner = MagicMock()
        session_runner.run_session = AsyncMock(side_effect=_session_samples)
        factory, playwright = _mock_async_playwright()

        with patch('src.pageload.orchestrator.async_playwright', factory):
            samples = await LoadOrchestrator(config, session_runner).run()

        assert [s.session_id for s in samples] == [1, 1, 2, 2, 3, 3]
        assert [s.iteration for s in samples] == [1, 2, 1, 2, 1, 2]
        assert [c.args for c in session_runner.run_session.await_args_list] == [
            (playwright.chromium, 1),
            (playwright.chromium, 2),
            (playwright.chromium, 3),
        ]
        assert mock_sleep.await_count == 2
        mock_sleep.assert_awaited_with(0.5)

    @pytest.mark.asyncio
    @patch('src.pageload.orchestrator.asyncio.sleep', new_callable=AsyncMock)
    async def test_single_session_has_no_delay(self, mock_sleep):
        """Test no delay follows the last session."""
        config = Config(target_url=TEST_URL, sessions=1)
        session_runner = MagicMock()
        session_runner.run_session = AsyncMock(side_effect=_session_samples)
        factory, _ = _mock_async_playwright()

        with patch('src.pageload.orchestrator.async_playwright', factory):
            samples = await LoadOrchestrator(config, session_runner).run()

        assert len(samples) == 2
        mock_sleep.assert_not_called()

    @pytest.mark.asyncio
    @patch('src.pageload.orchestrator.asyncio.sleep', new_callable=AsyncMock)
    async def test_session_failure_aborts_run(self, mock_sleep):
        """Test a failing session stops the run before later sessions start."""
        config = Config(target_url=TEST_URL, sessions=3)
        session_runner = MagicMock()
        session_runner.run_session = AsyncMock(side_effect=[
            _session_samples(None, 1),
            SessionExecutionError("Session #2 failed"),
        ])
        factory, _ = _mock_async_playwright()

        with patch('src.pageload.orchestrator.async_playwright', factory):
            with pytest.raises(SessionExecutionError):
                await LoadOrchestrator(config, session_runner).run()

        assert session_runner.run_session.await_count == 2
