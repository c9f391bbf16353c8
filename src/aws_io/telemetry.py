"""Counters and duration histograms for the wrapped AWS calls."""
import logging
import time
from typing import Awaitable, Optional, TypeVar

from prometheus_client import CollectorRegistry, Counter, Histogram

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Telemetry:
    """Invocation counter and duration timer keyed by operation name.

    Each instance owns its metrics. When no registry is passed a private
    ``CollectorRegistry`` is created, so two instances never clash on
    metric names. Pass ``prometheus_client.REGISTRY`` to expose the metrics
    through the default exporter.

    ``count`` and ``duration_samples`` read the current values back, for
    health endpoints or assertions that should not parse the exposition
    format.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None, namespace: str = "aws_io"):
        self.registry = registry if registry is not None else CollectorRegistry()
        self.namespace = namespace
        self._calls = Counter(
            "operations_total",
            "Number of AWS operations invoked, successful or not.",
            ["operation"],
            namespace=namespace,
            registry=self.registry,
        )
        self._durations = Histogram(
            "operation_duration_seconds",
            "Time spent waiting on the AWS SDK call.",
            ["operation"],
            namespace=namespace,
            registry=self.registry,
        )

    def increase_count(self, name: str) -> None:
        """Increment the invocation counter for ``name``."""
        self._calls.labels(operation=name).inc()

    async def track_duration(self, name: str, operation: Awaitable[T]) -> T:
        """Await ``operation`` and record how long it took.

        The sample is recorded whether the awaitable returns or raises;
        exceptions propagate untouched.
        """
        start_time = time.perf_counter()
        try:
            return await operation
        finally:
            duration = time.perf_counter() - start_time
            self._durations.labels(operation=name).observe(duration)
            logger.debug(f"{name} took {duration:.3f}s")

    def unregister(self) -> None:
        """Remove this instance's metrics from its registry."""
        self.registry.unregister(self._calls)
        self.registry.unregister(self._durations)

    def count(self, name: str) -> float:
        """Current value of the invocation counter for ``name``, 0 if never called."""
        value = self.registry.get_sample_value(
            f"{self.namespace}_operations_total", {"operation": name}
        )
        return value or 0.0

    def duration_samples(self, name: str) -> float:
        """Number of duration samples recorded for ``name``, 0 if never called."""
        value = self.registry.get_sample_value(
            f"{self.namespace}_operation_duration_seconds_count", {"operation": name}
        )
        return value or 0.0
