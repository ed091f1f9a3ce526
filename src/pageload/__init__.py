"""Page load tester package initialization."""
from .models import WebVitals, Sample, MetricStats, RunStats, RunReport
from .constants import PageLoadConstants
from .exceptions import MetricsCollectionError, SessionExecutionError, ReportLoadError
from .metrics_collector import WebVitalsCollector
from .iteration_runner import IterationRunner
from .session_runner import SessionRunner
from .orchestrator import LoadOrchestrator
from .stats_analyzer import StatsAnalyzer
from .reporter import ConsoleReporter
from .result_exporter import ResultExporter
from .visualization_generator import VisualizationGenerator
from .runner import PageLoadRunner

__all__ = [
    'WebVitals',
    'Sample',
    'MetricStats',
    'RunStats',
    'RunReport',
    'PageLoadConstants',
    'MetricsCollectionError',
    'SessionExecutionError',
    'ReportLoadError',
    'WebVitalsCollector',
    'IterationRunner',
    'SessionRunner',
    'LoadOrchestrator',
    'StatsAnalyzer',
    'ConsoleReporter',
    'ResultExporter',
    'VisualizationGenerator',
    'PageLoadRunner'
]
