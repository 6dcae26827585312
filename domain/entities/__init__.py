# import
from .transaction import Amount, BookingStatus, Paging, Transaction, TransactionPage, TransactionType
from .paging import PagingOptions
from .fetch_result import FetchResult, StopReason

__all__ = [
    "Amount",
    "BookingStatus",
    "Paging",
    "Transaction",
    "TransactionPage",
    "TransactionType",
    "PagingOptions",
    "FetchResult",
    "StopReason",
]
