from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from .transaction import TransactionPage


class StopReason(Enum):
    EXHAUSTED = "exhausted"
    CUTOFF_REACHED = "cutoff_reached"
    SINGLE_PAGE = "single_page"


@dataclass(frozen=True)
class FetchResult:
    page: TransactionPage
    requests: int
    stop_reason: StopReason
    since: Optional[date] = None

    @property
    def matches(self) -> int:
        return self.page.paging.matches
