"""
Bank API Client using httpx for async HTTP calls.

This client implements the bank API communication layer for the account
transactions endpoint, with error handling and failure metrics. Session
management is not its concern: it is handed a ready bearer access token.
"""
import httpx
from typing import Any

from domain.entities import PagingOptions
from domain.exceptions import BankAPIError
from infrastructure.metrics.metrics import bank_fetch_failures_total


class BankClient:
    """
    HTTP client for fetching account transactions from the bank API.

    Uses httpx.AsyncClient with configurable timeouts:
    - connect_timeout: 2 seconds (default)
    - read_timeout: 10 seconds (default)

    Failures are never retried here: a retry could outlive a short-lived
    session token. On failure, increments bank_fetch_failures_total metric.
    """

    def __init__(
        self,
        base_url: str,
        connect_timeout: float = 2.0,
        read_timeout: float = 10.0,
        access_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the bank client.

        Args:
            base_url: Base URL of the bank API (e.g., "https://api.comdirect.de/api")
            connect_timeout: Connection timeout in seconds (default: 2.0)
            read_timeout: Read timeout in seconds (default: 10.0)
            access_token: Optional OAuth bearer token
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout

        headers = {"Accept": "application/json"}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        # httpx.Timeout requires either a default or all four parameters
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(
                connect=connect_timeout,
                read=read_timeout,
                write=read_timeout,
                pool=connect_timeout,
            ),
            headers=headers,
            transport=transport,
        )

    def transactions_url(self, account_id: str) -> str:
        return f"{self.base_url}/banking/v1/accounts/{account_id}/transactions"

    async def fetch_transactions(self, account_id: str, paging: PagingOptions) -> dict[str, Any]:
        """
        Fetch one page of account transactions.

        Args:
            account_id: The bank account identifier
            paging: Requested count and first index

        Returns:
            The decoded JSON body, {"paging": {...}, "values": [...]}

        Raises:
            BankAPIError: If the API call fails (non-2xx, timeout, network error or non-JSON body)
        """
        url = self.transactions_url(account_id)
        try:
            response = await self._client.get(url, params=paging.as_query())
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            bank_fetch_failures_total.inc()
            raise BankAPIError(
                f"Bank API returned {e.response.status_code}: {e.response.text}"
            ) from e
        except httpx.TimeoutException as e:
            bank_fetch_failures_total.inc()
            raise BankAPIError(
                f"Bank API request timed out after {self.read_timeout}s"
            ) from e
        except httpx.RequestError as e:
            bank_fetch_failures_total.inc()
            raise BankAPIError(
                f"Bank API request failed: {str(e)}"
            ) from e
        except ValueError as e:
            bank_fetch_failures_total.inc()
            raise BankAPIError(
                f"Bank API returned a body that is not JSON: {str(e)}"
            ) from e

        if not isinstance(data, dict):
            bank_fetch_failures_total.inc()
            raise BankAPIError(f"Unexpected transactions payload of type {type(data).__name__}")
        return data

    async def close(self):
        """Close the httpx client."""
        await self._client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
