"""
Prometheus metrics for monitoring the smart-calendar service.

Defines and exposes metrics for:
- Text extraction volume and outcome
- Extraction latency
- Calendar event creation and rejection

Metrics are exposed via HTTP endpoint for Prometheus scraping.
"""

import structlog
from prometheus_client import (
    REGISTRY,
    Counter,
    Gauge,
    Histogram,
    start_http_server,
)

from src.config.settings import get_settings

logger = structlog.get_logger(__name__)

# Extraction is pure regex work, so buckets start well below a millisecond
LATENCY_BUCKETS = (0.0001, 0.0005, 0.001, 0.0025, 0.005, 0.01, 0.05, 0.1)


class MetricsCollector:
    """
    Prometheus metrics collector for the smart-calendar service.

    Usage:
        metrics = get_metrics()
        metrics.record_extraction(has_date=True, latency=0.0004)
        metrics.events_created.inc()
    """

    def __init__(self):
        """Initialize Prometheus metrics."""

        self.extractions = Counter(
            "smart_calendar_extractions_total",
            "Total text extractions performed",
            ["outcome"],  # dated, undated
        )

        self.extraction_latency = Histogram(
            "smart_calendar_extraction_latency_seconds",
            "Time to extract event info from one input",
            buckets=LATENCY_BUCKETS,
        )

        self.events_created = Counter(
            "smart_calendar_events_created_total",
            "Total calendar events created from text",
        )

        self.inputs_rejected = Counter(
            "smart_calendar_inputs_rejected_total",
            "Total inputs rejected by the calendar",
            ["reason"],  # empty, no_date
        )

        self.events_stored = Gauge(
            "smart_calendar_events_stored",
            "Number of events currently held in memory",
        )

    def start_server(self, port: int | None = None) -> None:
        """
        Start Prometheus metrics HTTP server.

        Args:
            port: Port to expose metrics on (default from settings)
        """
        settings = get_settings()
        port = port or settings.metrics_port

        start_http_server(port, registry=REGISTRY)
        logger.info("Prometheus metrics server started", port=port)

    def record_extraction(self, has_date: bool, latency: float | None = None) -> None:
        """
        Record one extraction.

        Args:
            has_date: Whether a date was resolved
            latency: Extraction time in seconds
        """
        self.extractions.labels(outcome="dated" if has_date else "undated").inc()
        if latency is not None:
            self.extraction_latency.observe(latency)

    def record_rejection(self, reason: str) -> None:
        """Record an input the calendar refused to turn into an event."""
        self.inputs_rejected.labels(reason=reason).inc()


# Global metrics instance
_metrics: MetricsCollector | None = None


def get_metrics() -> MetricsCollector:
    """Get global metrics collector instance."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics
