"""Prometheus metrics for the scale calculator.

Calculations are labelled by canonical scale type.

Metrics:
    scalecalc_calculations_total             Counter by scale type and status (success/rejected)
    scalecalc_calculation_latency_seconds    Histogram of calculation latency

Usage::

    from infrastructure.metrics import LatencyTimer, record_calculation

    with LatencyTimer() as t:
        report = calculate_scale("E", "b", "Dorian")
    record_calculation(scale_type="Dorian", status="success", latency_seconds=t.elapsed)
"""

from __future__ import annotations

import logging
import time

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

logger = logging.getLogger(__name__)

_REGISTRY = CollectorRegistry()

scale_calculations_total = Counter(
    "scalecalc_calculations_total",
    "Scale calculations by scale type and status",
    ["scale_type", "status"],
    registry=_REGISTRY,
)

scale_calculation_latency_seconds = Histogram(
    "scalecalc_calculation_latency_seconds",
    "Scale calculation latency in seconds",
    ["scale_type"],
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05],
    registry=_REGISTRY,
)

VALID_STATUSES: frozenset[str] = frozenset({"success", "rejected"})


def record_calculation(
    *,
    scale_type: str,
    status: str,
    latency_seconds: float,
) -> None:
    """Record a completed scale calculation.

    Args:
        scale_type: Canonical scale type name.
        status: "success" or "rejected".
        latency_seconds: Wall-clock time of the calculation in seconds.
    """
    if status not in VALID_STATUSES:
        raise ValueError(f"status must be one of {sorted(VALID_STATUSES)}, got {status!r}")
    scale_calculations_total.labels(scale_type=scale_type, status=status).inc()
    scale_calculation_latency_seconds.labels(scale_type=scale_type).observe(latency_seconds)
    logger.debug("Recorded %s calculation for %s", status, scale_type)


def get_metrics_response() -> tuple[bytes, str]:
    """Generate Prometheus text exposition format.

    Returns:
        Tuple of (body_bytes, content_type_string).
    """
    return generate_latest(_REGISTRY), CONTENT_TYPE_LATEST


class LatencyTimer:
    """Context manager for measuring latency.

    Usage::

        with LatencyTimer() as t:
            report = calculate_scale("C")
        record_calculation(scale_type="Major", status="success", latency_seconds=t.elapsed)
    """

    def __init__(self) -> None:
        """Initialize timer."""
        self._start: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> LatencyTimer:
        """Start timing."""
        self._start = time.perf_counter()
        return self

    def __exit__(self, *_: object) -> None:
        """Stop timing and record elapsed."""
        self.elapsed = time.perf_counter() - self._start
