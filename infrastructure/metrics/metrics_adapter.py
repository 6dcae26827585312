"""
Metrics adapter that implements MetricsPort protocol.

This adapter wraps the Prometheus counters to provide a clean interface
for the application layer.
"""
from infrastructure.metrics.metrics import (
    remittance_decode_errors_total,
    transaction_pages_fetched_total,
)


class MetricsAdapter:
    """Adapter that implements MetricsPort on top of prometheus_client counters."""

    def increment_pages_fetched(self, count: int = 1) -> None:
        transaction_pages_fetched_total.inc(count)

    def increment_remittance_decode_errors(self) -> None:
        remittance_decode_errors_total.inc()
