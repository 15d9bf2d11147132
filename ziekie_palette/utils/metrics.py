"""
Ziekie Palette Metrics Collection
In-process metrics collection for extraction outcomes and stage timings.
"""
from collections import defaultdict, Counter
from typing import Dict, List, Optional
from threading import Lock


class MetricsCollector:
    """Simple in-process metrics collector."""

    def __init__(self):
        """Initialize metrics collector."""
        self._lock = Lock()
        self._counters: Dict[str, int] = Counter()
        self._timings: Dict[str, List[float]] = defaultdict(list)

    def increment_extraction_count(self):
        """Increment total extraction counter."""
        with self._lock:
            self._counters["extractions_total"] += 1

    def increment_default_palette_count(self):
        """Increment counter of extractions answered with the default palette."""
        with self._lock:
            self._counters["default_palette_total"] += 1

    def increment_invalid_input_count(self):
        """Increment rejected input counter."""
        with self._lock:
            self._counters["invalid_input_total"] += 1

    def record_timing(self, stage: str, duration_ms: float):
        """Record timing for a pipeline stage."""
        with self._lock:
            self._timings[f"{stage}_duration_ms"].append(duration_ms)

    def get_counters(self) -> Dict[str, int]:
        """Get current counter values."""
        with self._lock:
            return dict(self._counters)

    def get_timing_stats(self) -> Dict[str, Dict[str, float]]:
        """Get timing statistics."""
        with self._lock:
            stats = {}
            for stage, timings in self._timings.items():
                if timings:
                    stats[stage] = {
                        "count": len(timings),
                        "mean": sum(timings) / len(timings),
                        "min": min(timings),
                        "max": max(timings),
                        "p50": self._percentile(timings, 50),
                        "p95": self._percentile(timings, 95)
                    }
            return stats

    def reset(self):
        """Reset all metrics (for testing)."""
        with self._lock:
            self._counters.clear()
            self._timings.clear()

    @staticmethod
    def _percentile(data: List[float], percentile: int) -> float:
        """Calculate percentile of data."""
        if not data:
            return 0.0

        sorted_data = sorted(data)
        k = (len(sorted_data) - 1) * percentile / 100
        f = int(k)
        c = k - f

        if f + 1 < len(sorted_data):
            return sorted_data[f] + c * (sorted_data[f + 1] - sorted_data[f])
        else:
            return sorted_data[f]


# Global metrics instance
_metrics: Optional[MetricsCollector] = None


def get_metrics() -> MetricsCollector:
    """Get or create global metrics collector."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics


def reset_metrics():
    """Reset global metrics (for testing)."""
    global _metrics
    if _metrics is not None:
        _metrics.reset()
