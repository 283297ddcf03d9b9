"""
Prometheus metrics collection for csv-automation-bot

Counts records through each pipeline stage and times the stages so a
long-running `watch` process can be scraped.
"""
import os
from typing import Optional

from prometheus_client import (
    Counter,
    Histogram,
    CollectorRegistry,
    generate_latest,
)


# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# RECORD METRICS
# =======================

records_read_total = Counter(
    name="pipeline_records_read_total",
    documentation="Total number of records parsed from input files",
    registry=REGISTRY,
)

records_removed_total = Counter(
    name="pipeline_records_removed_total",
    documentation="Total number of records dropped while cleaning",
    labelnames=["reason"],  # reason: duplicate, invalid
    registry=REGISTRY,
)

records_written_total = Counter(
    name="pipeline_records_written_total",
    documentation="Total number of records written to category files",
    registry=REGISTRY,
)

# =======================
# FILE METRICS
# =======================

output_files_total = Counter(
    name="pipeline_output_files_total",
    documentation="Total number of category files written",
    registry=REGISTRY,
)

files_archived_total = Counter(
    name="pipeline_files_archived_total",
    documentation="Total number of input files moved to the archive",
    registry=REGISTRY,
)

# =======================
# RUN METRICS
# =======================

runs_total = Counter(
    name="pipeline_runs_total",
    documentation="Total number of pipeline runs",
    labelnames=["status"],  # status: success, failure
    registry=REGISTRY,
)

stage_duration_seconds = Histogram(
    name="pipeline_stage_duration_seconds",
    documentation="Time spent in each pipeline stage in seconds",
    labelnames=["stage"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 30.0],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def start_metrics_server(port: Optional[int] = None) -> None:
    """
    Start HTTP server for Prometheus metrics

    Args:
        port: Port to listen on (defaults to env var METRICS_PORT or 8000)
    """
    # Lazy import: avoids port binding on import
    from prometheus_client import start_http_server

    metrics_port = port or int(os.getenv("METRICS_PORT", "8000"))
    start_http_server(metrics_port, registry=REGISTRY)


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(stage_duration_seconds, stage="clean"):
            # do work
            pass
    """

    def __init__(self, histogram: Histogram, **labels):
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        self.timer = self.histogram.labels(**self.labels).time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    if value <= 0:
        return
    if labels:
        counter.labels(**labels).inc(value)
    else:
        counter.inc(value)


def get_sample_value(name: str, labels: Optional[dict] = None) -> float:
    """Read the current value of a sample from the registry (0.0 if unset)."""
    value = REGISTRY.get_sample_value(name, labels or {})
    return value or 0.0
