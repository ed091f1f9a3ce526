"""Main entry point for the page load performance tester."""
import asyncio

from src.shared.config import Config
from src.shared.logging import LoggingManager
from src.pageload import PageLoadRunner


def main() -> None:
    """Run one performance test with the configuration from env and config.json."""
    config = Config()
    LoggingManager.setup_logging(config.log_level, config)

    runner = PageLoadRunner(config)
    asyncio.run(runner.run())


if __name__ == "__main__":
    main()
