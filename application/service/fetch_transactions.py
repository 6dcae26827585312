import asyncio
import time
from datetime import date
from typing import Optional

from domain.entities import FetchResult, PagingOptions, StopReason, TransactionPage
from domain.exceptions import BankAPIError
from domain.interfaces import TransactionRepository, MetricsPort, LoggingPort
from domain.services import DateFilter


class NoOpLogger:
    def debug(self, event: str, **kwargs): pass
    def info(self, event: str, **kwargs): pass
    def warning(self, event: str, **kwargs): pass
    def error(self, event: str, exc_info: bool = False, **kwargs): pass


class FetchTransactionsService:
    def __init__(
        self,
        transaction_repo: TransactionRepository,
        metrics_port: Optional[MetricsPort] = None,
        logging_port: Optional[LoggingPort] = None,
        page_timeout: Optional[float] = None,
    ):
        """
        Initialize the transaction fetch service.

        Args:
            transaction_repo: Repository serving pages of account transactions (required)
            metrics_port: Metrics port for emitting metrics (optional)
            logging_port: Logging port for structured logging (optional)
            page_timeout: Deadline in seconds for one page request; None or 0 disables it
        """
        self.transaction_repo = transaction_repo
        self.metrics_port = metrics_port
        self.logging_port = logging_port
        self.page_timeout = page_timeout or None

    async def execute(
        self,
        account_id: str,
        since: Optional[date],
        page_size: int,
        page_index: int = 0,
    ) -> FetchResult:
        """
        Fetch the transactions of an account booked on or after `since`.

        Pages are requested from index 0 with a growing count
        (page_size, 2 * page_size, ...) until the API is exhausted or the
        oldest transaction of a page is older than `since`. The result is
        then filtered down to `since`.

        Without `since`, a single page of `page_size` transactions starting at
        `page_index` is fetched and returned unfiltered.

        Args:
            account_id: The bank account identifier
            since: Inclusive cutoff date (optional)
            page_size: Page size hint, a positive integer
            page_index: First index for the single-page fetch

        Raises:
            ValueError: If page_size or page_index is out of range
            BankAPIError: If a page request fails
            DateParseError: If a booking date cannot be parsed
        """
        if page_size < 1:
            raise ValueError(f"page size must be a positive integer, got {page_size}")
        if page_index < 0:
            raise ValueError(f"page index must not be negative, got {page_index}")

        log = self.logging_port.bind(account_id=account_id, step="transaction_fetch") if self.logging_port else NoOpLogger()
        start_time = time.time()
        log.info(
            "transaction_fetch_started",
            since=since.isoformat() if since else None,
            page_size=page_size,
            page_index=page_index,
        )

        try:
            if since is None:
                page = await self._fetch_page(account_id, PagingOptions(count=page_size, first=page_index), 1, log)
                result = FetchResult(page=page, requests=1, stop_reason=StopReason.SINGLE_PAGE)
            else:
                result = await self._fetch_until(account_id, since, page_size, log)
        except Exception as e:
            log.error(
                "transaction_fetch_failed",
                duration_ms=round((time.time() - start_time) * 1000, 2),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        log.info(
            "transaction_fetch_completed",
            duration_ms=round((time.time() - start_time) * 1000, 2),
            requests=result.requests,
            stop_reason=result.stop_reason.value,
            transaction_count=len(result.page),
            matches=result.matches,
        )
        return result

    async def _fetch_until(self, account_id: str, since: date, page_size: int, log) -> FetchResult:
        page_number = 1
        while True:
            # Re-fetch a growing prefix from index 0; needs a stable order across requests
            requested = page_size * page_number
            page = await self._fetch_page(account_id, PagingOptions(count=requested, first=0), page_number, log)

            reason = self._stop_reason(page, requested, since)
            if reason is not None:
                log.info("transaction_fetch_stopped", reason=reason.value, requests=page_number)
                filtered = DateFilter.filter_since(page, since)
                return FetchResult(page=filtered, requests=page_number, stop_reason=reason, since=since)
            page_number += 1

    @staticmethod
    def _stop_reason(page: TransactionPage, requested: int, since: date) -> Optional[StopReason]:
        if len(page) == 0:
            return StopReason.EXHAUSTED
        if len(page) == page.paging.matches:
            return StopReason.EXHAUSTED
        # A short page means there is nothing more to get; asking again would loop forever
        if len(page) < requested:
            return StopReason.EXHAUSTED
        # Newest first: the last transaction is the oldest of the page
        oldest = page.last.parsed_booking_date()
        if oldest is not None and oldest < since:
            return StopReason.CUTOFF_REACHED
        return None

    async def _fetch_page(self, account_id: str, paging: PagingOptions, page_number: int, log) -> TransactionPage:
        fetch_start = time.time()
        try:
            page = await asyncio.wait_for(
                self.transaction_repo.get_transactions(account_id, paging),
                timeout=self.page_timeout,
            )
        except asyncio.TimeoutError as e:
            raise BankAPIError(
                f"Transaction page {page_number} not served within {self.page_timeout}s"
            ) from e

        if self.metrics_port:
            self.metrics_port.increment_pages_fetched()
        if len(page) > paging.count:
            log.warning("transaction_page_oversized", page=page_number, requested=paging.count, returned=len(page))
        log.info(
            "transaction_page_fetched",
            page=page_number,
            requested=paging.count,
            first=paging.first,
            returned=len(page),
            matches=page.paging.matches,
            duration_ms=round((time.time() - fetch_start) * 1000, 2),
        )
        return page
