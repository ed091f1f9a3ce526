"""Prints run statistics to the console."""
from typing import Any, Mapping

from .models import MetricStats, RunStats


class ConsoleReporter:
    """Prints a human-readable summary of a run."""

    @staticmethod
    def _print_metric(title: str, stats: MetricStats, include_std_dev: bool = False) -> None:
        print(f"\n📊 {title} (ms):")
        print(f"  Min: {stats.min:.2f}")
        print(f"  Max: {stats.max:.2f}")
        print(f"  Avg: {stats.avg:.2f}")
        print(f"  Median: {stats.median:.2f}")
        print(f"  95th Percentile: {stats.p95:.2f}")
        if include_std_dev:
            print(f"  Std Deviation: {stats.std_dev:.2f}")

    @staticmethod
    def print_summary(stats: RunStats, config: Mapping[str, Any]) -> None:
        """
        Print load time statistics, plus LCP and FCP when metrics were collected.

        Args:
            stats: Aggregated run statistics.
            config: Report view of the run configuration.
        """
        print("\n===== TEST RESULTS =====")
        print(
            f"Sample size: {stats.sample_size} "
            f"({config['sessions']} sessions × {config['iterations_per_session']} iterations)"
        )

        ConsoleReporter._print_metric("Load Time", stats.load_time, include_std_dev=True)

        if config.get("collect_metrics", True):
            ConsoleReporter._print_metric("Largest Contentful Paint", stats.lcp)
            ConsoleReporter._print_metric("First Contentful Paint", stats.fcp)
