"""Page load runner to orchestrate a full test run."""
import logging
from pathlib import Path
from typing import Optional

from src.shared.config import Config
from .metrics_collector import WebVitalsCollector
from .iteration_runner import IterationRunner
from .session_runner import SessionRunner
from .orchestrator import LoadOrchestrator
from .stats_analyzer import StatsAnalyzer
from .reporter import ConsoleReporter
from .result_exporter import ResultExporter
from .visualization_generator import VisualizationGenerator
from .models import RunReport


# Configure logging
logger = logging.getLogger(__name__)


class PageLoadRunner:
    """Drives the browser, aggregates the samples, prints and persists the run."""

    def __init__(self, config: Config, orchestrator: Optional[LoadOrchestrator] = None):
        self.config = config
        self.collector = WebVitalsCollector()
        self.iteration_runner = IterationRunner(config, self.collector)
        self.session_runner = SessionRunner(config, self.iteration_runner)
        self.orchestrator = orchestrator or LoadOrchestrator(config, self.session_runner)
        self.stats_analyzer = StatsAnalyzer()
        self.reporter = ConsoleReporter()
        self.result_exporter = ResultExporter()
        self.visualization_generator = VisualizationGenerator()
        self.saved_path: Optional[Path] = None

    async def run(self) -> RunReport:
        """Run the complete page load test."""
        try:
            logger.info(
                f"Starting performance test with {self.config.sessions} sessions, "
                f"{self.config.iterations_per_session} iterations each"
            )
            logger.info(f"Target URL: {self.config.target_url}")

            samples = await self.orchestrator.run()
            stats = self.stats_analyzer.compute_run_stats(samples)
            report = RunReport(config=self.config.to_report_dict(), stats=stats, results=samples)

            self.reporter.print_summary(stats, report.config)

            if self.config.save_results:
                self.save(report)

            logger.info("Performance test completed successfully!")
            return report

        except Exception as e:
            logger.error(f"Performance test failed: {e}", stack_info=True)
            raise

    def save(self, report: RunReport) -> Path:
        """Write the report and the optional CSV and graph outputs."""
        output_dir = Path(self.config.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        self.saved_path = self.result_exporter.save_report(report, output_dir)
        print(f"\nResults saved to {self.saved_path}")

        if self.config.export_csv:
            self.result_exporter.save_samples_to_csv(report.results, self.saved_path.with_suffix(".csv"))

        if self.config.generate_graph:
            self.visualization_generator.plot_load_times(report.results, self.saved_path.with_suffix(".png"))

        return self.saved_path
