from .transaction_repo import TransactionRepository
from .metrics_port import MetricsPort
from .logging_port import LoggingPort, BoundLogger

__all__ = ["TransactionRepository", "MetricsPort", "LoggingPort", "BoundLogger"]
