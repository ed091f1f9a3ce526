"""Handles exporting page load results to various formats."""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union
import pandas as pd

from .constants import PageLoadConstants
from .exceptions import ReportLoadError
from .models import RunReport, RunStats, Sample


# Configure logging
logger = logging.getLogger(__name__)


class ResultExporter:
    """Handles exporting page load results to various formats."""

    @staticmethod
    def iso_timestamp(moment: datetime) -> str:
        """Format a moment as UTC ISO-8601 with millisecond precision, e.g. 2024-05-01T10:20:30.123Z."""
        moment = moment.astimezone(timezone.utc)
        return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"

    @staticmethod
    def build_filename(moment: Optional[datetime] = None) -> str:
        """
        Build a filesystem-safe report file name.

        Args:
            moment: Time of the run, defaults to now.

        Returns:
            File name like perf-test-2024-05-01T10-20-30-123Z.json.
        """
        if moment is None:
            moment = datetime.now(timezone.utc)
        stamp = ResultExporter.iso_timestamp(moment).replace(":", "-").replace(".", "-")
        return f"{PageLoadConstants.RESULT_FILE_PREFIX}{stamp}.json"

    @staticmethod
    def save_report(report: RunReport, output_dir: Union[Path, str] = ".", moment: Optional[datetime] = None) -> Path:
        """
        Save the full run as indented JSON.

        Args:
            report: Config, samples and stats of the run.
            output_dir: Directory to write the report into.
            moment: Time of the run used in the file name.

        Returns:
            Path of the written file.
        """
        output_path = Path(output_dir) / ResultExporter.build_filename(moment)
        with open(output_path, "w") as f:
            json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
        logger.info(f"Report saved: {output_path}")
        return output_path

    @staticmethod
    def load_report(input_path: Union[Path, str]) -> RunReport:
        """
        Load a report saved by save_report without running a browser.

        Args:
            input_path: Path of the JSON report.

        Returns:
            The reconstructed RunReport.

        Raises:
            ReportLoadError: If the file is missing or malformed.
        """
        try:
            with open(input_path, "r") as f:
                data = json.load(f)
            report = RunReport(
                config=data["config"],
                stats=RunStats.from_dict(data["stats"]),
                results=[Sample(**item) for item in data["results"]],
            )
        except (OSError, json.JSONDecodeError, KeyError, TypeError) as e:
            logger.error(f"Failed to load report {input_path}: {e}")
            raise ReportLoadError(f"Unable to load report from {input_path}") from e

        logger.info(f"Report loaded: {input_path} ({len(report.results)} samples)")
        return report

    @staticmethod
    def save_samples_to_csv(samples: List[Sample], output_path: Union[Path, str]) -> None:
        """
        Save raw samples to CSV for spreadsheet analysis.

        Args:
            samples: Samples of the run.
            output_path: Path to save the CSV.
        """
        if not samples:
            logger.warning("No samples available for CSV export")
            return

        df = pd.DataFrame([sample.to_dict() for sample in samples])
        df = df.sort_values(by=["session_id", "iteration"])
        df.to_csv(output_path, index=False)
        logger.info(f"Samples saved to CSV: {output_path}")
