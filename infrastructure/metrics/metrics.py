# infrastructure/metrics/metrics.py
from prometheus_client import CollectorRegistry, Counter, write_to_textfile

# Dedicated registry so a textfile dump only carries this tool's metrics
registry = CollectorRegistry()

transaction_pages_fetched_total = Counter(
    "transaction_pages_fetched_total",
    "Transaction pages fetched from the bank API",
    registry=registry,
)

bank_fetch_failures_total = Counter(
    "bank_fetch_failures_total",
    "Bank fetch failures",
    registry=registry,
)

remittance_decode_errors_total = Counter(
    "remittance_decode_errors_total",
    "Malformed remittance information strings",
    registry=registry,
)


def write_metrics_textfile(path: str) -> None:
    """Dump the registry in the node-exporter textfile format."""
    write_to_textfile(path, registry)
