#!/usr/bin/env python3
"""
Utility to re-print the summary of a saved performance test without driving a browser.
"""
import sys

from src.pageload.reporter import ConsoleReporter
from src.pageload.result_exporter import ResultExporter
from src.pageload.exceptions import ReportLoadError


def main() -> int:
    """Main entry point for loading a saved report."""
    if len(sys.argv) < 2:
        print("Usage: load_perf_results.py <perf-test-report.json>")
        return 1

    report_path = sys.argv[1]
    print(f"Loading performance test report: {report_path}")

    try:
        report = ResultExporter.load_report(report_path)
    except ReportLoadError as e:
        print(f"\n{e}")
        return 1

    ConsoleReporter.print_summary(report.stats, report.config)
    return 0


if __name__ == "__main__":
    exit(main())
