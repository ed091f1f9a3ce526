"""Data models for the page load tester."""
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class WebVitals:
    """Paint and navigation timings read from a loaded page, in milliseconds."""
    dom_content_loaded: float = 0.0
    lcp: float = 0.0
    fcp: float = 0.0
    tti: float = 0.0

    @classmethod
    def zero(cls) -> "WebVitals":
        """Substitute used when collection fails."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WebVitals":
        return cls(
            dom_content_loaded=float(data.get("domContentLoaded") or 0),
            lcp=float(data.get("lcp") or 0),
            fcp=float(data.get("fcp") or 0),
            tti=float(data.get("tti") or 0),
        )


@dataclass(frozen=True)
class Sample:
    """One iteration's measurement."""
    session_id: int
    iteration: int
    load_time: float
    timestamp: int
    dom_content_loaded: float = 0.0
    largest_contentful_paint: float = 0.0
    first_contentful_paint: float = 0.0
    time_to_interactive: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MetricStats:
    """Summary statistics for one metric."""
    min: float = 0.0
    max: float = 0.0
    avg: float = 0.0
    median: float = 0.0
    p95: float = 0.0
    std_dev: float = 0.0


@dataclass(frozen=True)
class RunStats:
    """Aggregated statistics for a whole run."""
    load_time: MetricStats
    lcp: MetricStats
    fcp: MetricStats
    sample_size: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunStats":
        return cls(
            load_time=MetricStats(**data["load_time"]),
            lcp=MetricStats(**data["lcp"]),
            fcp=MetricStats(**data["fcp"]),
            sample_size=int(data["sample_size"]),
        )


@dataclass
class RunReport:
    """Everything persisted for a run: config used, raw samples and stats."""
    config: Dict[str, Any]
    stats: RunStats
    results: List[Sample] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "config": self.config,
            "results": [sample.to_dict() for sample in self.results],
            "stats": self.stats.to_dict(),
        }
