"""Analyzes and computes page load statistics."""
import logging
from typing import List, Sequence
import numpy as np

from .models import MetricStats, RunStats, Sample


# Configure logging
logger = logging.getLogger(__name__)


class StatsAnalyzer:
    """Reduces samples into summary statistics."""

    @staticmethod
    def compute_stats(values: Sequence[float]) -> MetricStats:
        """
        Compute min, max, mean, median, p95 and standard deviation.

        The median is the element at floor(n / 2) of the sorted values, so an
        even count yields the upper-middle element rather than an average.
        The p95 is the element at floor(0.95 * n). The standard deviation is
        the population deviation (divides by n).

        Args:
            values: Metric measurements in milliseconds.

        Returns:
            MetricStats dataclass, all zeros for empty input.
        """
        if not len(values):
            return MetricStats()

        ordered = np.sort(np.asarray(values, dtype=float))
        count = len(ordered)

        return MetricStats(
            min=float(ordered[0]),
            max=float(ordered[-1]),
            avg=float(np.mean(ordered)),
            median=float(ordered[count // 2]),
            p95=float(ordered[int(np.floor(count * 0.95))]),
            std_dev=float(np.std(ordered)),
        )

    @staticmethod
    def compute_run_stats(samples: List[Sample]) -> RunStats:
        """
        Compute load time, LCP and FCP statistics for a run.

        LCP and FCP only consider non-zero values, so their effective sample
        count may be smaller than the number of samples.

        Args:
            samples: Every sample collected during the run.

        Returns:
            RunStats with the total sample count.
        """
        load_times = [s.load_time for s in samples]
        lcp_times = [s.largest_contentful_paint for s in samples if s.largest_contentful_paint]
        fcp_times = [s.first_contentful_paint for s in samples if s.first_contentful_paint]

        logger.debug(
            f"Computing stats over {len(load_times)} load times, "
            f"{len(lcp_times)} LCP values, {len(fcp_times)} FCP values"
        )

        return RunStats(
            load_time=StatsAnalyzer.compute_stats(load_times),
            lcp=StatsAnalyzer.compute_stats(lcp_times),
            fcp=StatsAnalyzer.compute_stats(fcp_times),
            sample_size=len(samples),
        )
