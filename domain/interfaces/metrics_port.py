from typing_extensions import Protocol


class MetricsPort(Protocol):
    """Protocol for metrics operations."""

    def increment_pages_fetched(self, count: int = 1) -> None:
        """
        Increment the transaction_pages_fetched_total counter.

        Args:
            count: Number of page requests that completed
        """
        ...

    def increment_remittance_decode_errors(self) -> None:
        """Increment the remittance_decode_errors_total counter."""
        ...
