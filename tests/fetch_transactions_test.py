# fetch transactions use case test

import asyncio
from datetime import date, timedelta

import pytest

from application.service.fetch_transactions import FetchTransactionsService
from domain.entities import BookingStatus, Paging, PagingOptions, StopReason, TransactionPage
from domain.exceptions import BankAPIError, DateParseError
from domain.interfaces.transaction_repo import TransactionRepository


def _dated(make_transaction, newest: date, count: int) -> list:
    """`count` booked transactions, newest first, one per day."""
    return [
        make_transaction(booking_date=(newest - timedelta(days=i)).isoformat(), reference=f"T{i}")
        for i in range(count)
    ]


def _serve(transactions: list, matches: int | None = None):
    """side_effect serving slices of `transactions` like the bank API."""
    total = len(transactions) if matches is None else matches

    async def get_transactions(account_id: str, paging: PagingOptions) -> TransactionPage:
        values = tuple(transactions[paging.first:paging.first + paging.count])
        return TransactionPage(values=values, paging=Paging(index=paging.first, matches=total))

    return get_transactions


@pytest.fixture
def mock_repo(mocker):
    """Fixture to create a mock of the repository using pytest-mock"""
    return mocker.AsyncMock(spec=TransactionRepository)


def _requested_counts(mock_repo) -> list[tuple[int, int]]:
    return [(c.args[1].count, c.args[1].first) for c in mock_repo.get_transactions.call_args_list]


@pytest.mark.asyncio
async def test_stops_when_oldest_of_page_is_before_cutoff(mock_repo, make_transaction):
    # 22 matches, page hint 10; the 20th transaction is dated 2020-12-31
    transactions = _dated(make_transaction, date(2021, 1, 19), 22)
    assert transactions[19].booking_date == "2020-12-31"
    mock_repo.get_transactions.side_effect = _serve(transactions)

    result = await FetchTransactionsService(mock_repo).execute("acc", date(2021, 1, 1), 10)

    assert _requested_counts(mock_repo) == [(10, 0), (20, 0)]
    assert result.requests == 2
    assert result.stop_reason is StopReason.CUTOFF_REACHED
    assert result.matches == 22
    assert len(result.page) == 19
    assert min(t.booking_date for t in result.page.values) == "2021-01-01"


@pytest.mark.asyncio
async def test_cutoff_day_is_inclusive(mock_repo, make_transaction):
    transactions = _dated(make_transaction, date(2021, 1, 3), 6)
    mock_repo.get_transactions.side_effect = _serve(transactions)

    result = await FetchTransactionsService(mock_repo).execute("acc", date(2021, 1, 1), 5)

    assert [t.booking_date for t in result.page.values] == ["2021-01-03", "2021-01-02", "2021-01-01"]


@pytest.mark.asyncio
async def test_stops_when_all_matches_are_fetched(mock_repo, make_transaction):
    transactions = _dated(make_transaction, date(2021, 3, 1), 20)
    mock_repo.get_transactions.side_effect = _serve(transactions)

    result = await FetchTransactionsService(mock_repo).execute("acc", date(2020, 1, 1), 10)

    assert _requested_counts(mock_repo) == [(10, 0), (20, 0)]
    assert result.stop_reason is StopReason.EXHAUSTED
    assert len(result.page) == 20


@pytest.mark.asyncio
async def test_stops_on_empty_page(mock_repo):
    mock_repo.get_transactions.side_effect = _serve([], matches=0)

    result = await FetchTransactionsService(mock_repo).execute("acc", date(2021, 1, 1), 10)

    assert mock_repo.get_transactions.call_count == 1
    assert result.stop_reason is StopReason.EXHAUSTED
    assert len(result.page) == 0
    assert result.matches == 0


@pytest.mark.asyncio
async def test_short_page_stops_even_if_matches_disagree(mock_repo, make_transaction):
    # API reports more matches than it will ever return
    transactions = _dated(make_transaction, date(2021, 3, 1), 7)
    mock_repo.get_transactions.side_effect = _serve(transactions, matches=50)

    result = await FetchTransactionsService(mock_repo).execute("acc", date(2020, 1, 1), 10)

    assert mock_repo.get_transactions.call_count == 1
    assert result.stop_reason is StopReason.EXHAUSTED
    assert len(result.page) == 7


@pytest.mark.asyncio
async def test_keeps_growing_until_cutoff(mock_repo, make_transaction):
    transactions = _dated(make_transaction, date(2021, 3, 1), 100)
    mock_repo.get_transactions.side_effect = _serve(transactions)

    result = await FetchTransactionsService(mock_repo).execute("acc", date(2021, 1, 1), 5)

    # 2021-03-01 back to 2021-01-01 is 60 days; the 13th request (65 rows) reaches 2020-12-27
    counts = [count for count, _ in _requested_counts(mock_repo)]
    assert counts == [5 * n for n in range(1, 14)]
    assert result.stop_reason is StopReason.CUTOFF_REACHED
    assert len(result.page) == 60


@pytest.mark.asyncio
async def test_pending_last_transaction_does_not_stop(mock_repo, make_transaction):
    transactions = _dated(make_transaction, date(2021, 1, 5), 3)
    pending = make_transaction(status=BookingStatus.NOTBOOKED, booking_date="")
    served = [transactions[0], pending, transactions[1], transactions[2]]
    mock_repo.get_transactions.side_effect = _serve(served, matches=4)

    result = await FetchTransactionsService(mock_repo).execute("acc", date(2021, 1, 1), 2)

    assert mock_repo.get_transactions.call_count == 2
    assert pending in result.page.values


@pytest.mark.asyncio
async def test_without_cutoff_fetches_single_page_at_index(mock_repo, make_transaction):
    transactions = _dated(make_transaction, date(2021, 3, 1), 30)
    mock_repo.get_transactions.side_effect = _serve(transactions)

    result = await FetchTransactionsService(mock_repo).execute("acc", None, 10, page_index=5)

    assert _requested_counts(mock_repo) == [(10, 5)]
    assert result.stop_reason is StopReason.SINGLE_PAGE
    assert result.page.values == tuple(transactions[5:15])


@pytest.mark.asyncio
async def test_bad_booking_date_is_fatal(mock_repo, make_transaction):
    broken = [make_transaction(booking_date="2021/01/05")]
    mock_repo.get_transactions.side_effect = _serve(broken, matches=5)

    with pytest.raises(DateParseError):
        await FetchTransactionsService(mock_repo).execute("acc", date(2021, 1, 1), 1)


@pytest.mark.asyncio
async def test_transport_error_is_not_retried(mock_repo):
    mock_repo.get_transactions.side_effect = BankAPIError("Bank API returned 401: Unauthorized")

    with pytest.raises(BankAPIError):
        await FetchTransactionsService(mock_repo).execute("acc", date(2021, 1, 1), 10)

    assert mock_repo.get_transactions.call_count == 1


@pytest.mark.asyncio
async def test_page_timeout_becomes_transport_error(mock_repo):
    async def slow(account_id, paging):
        await asyncio.sleep(1)

    mock_repo.get_transactions.side_effect = slow

    with pytest.raises(BankAPIError, match="not served within"):
        await FetchTransactionsService(mock_repo, page_timeout=0.01).execute("acc", date(2021, 1, 1), 10)


@pytest.mark.asyncio
@pytest.mark.parametrize("page_size,page_index", [(0, 0), (-3, 0), (10, -1)])
async def test_invalid_paging_arguments(mock_repo, page_size, page_index):
    with pytest.raises(ValueError):
        await FetchTransactionsService(mock_repo).execute("acc", None, page_size, page_index)

    mock_repo.get_transactions.assert_not_called()


@pytest.mark.asyncio
async def test_ports_are_used(mocker, mock_repo, make_transaction):
    mock_repo.get_transactions.side_effect = _serve(_dated(make_transaction, date(2021, 1, 10), 3))
    metrics_port = mocker.MagicMock()
    logging_port = mocker.MagicMock()

    await FetchTransactionsService(mock_repo, metrics_port=metrics_port, logging_port=logging_port).execute(
        "acc-1", date(2021, 1, 1), 10
    )

    metrics_port.increment_pages_fetched.assert_called_once_with()
    logging_port.bind.assert_called_once_with(account_id="acc-1", step="transaction_fetch")
    events = [c.args[0] for c in logging_port.bind.return_value.info.call_args_list]
    assert "transaction_page_fetched" in events
    assert "transaction_fetch_completed" in events
