"""
Transaction Repository implementation using the Bank API client.

This adapter implements the TransactionRepository protocol from domain/interfaces
by fetching account transactions from the bank API and mapping the JSON payload
to domain entities.
"""
from decimal import Decimal, InvalidOperation
from typing import Any

from domain.entities import (
    Amount,
    BookingStatus,
    Paging,
    PagingOptions,
    Transaction,
    TransactionPage,
    TransactionType,
)
from domain.exceptions import BankAPIError
from domain.interfaces import TransactionRepository
from infrastructure.clients.bank_client import BankClient


def _holder_name(raw_txn: dict[str, Any], key: str) -> str:
    party = raw_txn.get(key) or {}
    return str(party.get("holderName") or "")


class TransactionRepoAPI(TransactionRepository):
    """
    Repository implementation that fetches transactions from the bank API.

    This follows the Adapter pattern, implementing the domain protocol
    while delegating to the infrastructure BankClient.
    """

    def __init__(self, bank_client: BankClient):
        self.bank_client = bank_client

    async def get_transactions(self, account_id: str, paging: PagingOptions) -> TransactionPage:
        """
        Fetch one page of account transactions and convert it to domain entities.

        Args:
            account_id: The bank account identifier
            paging: Requested count and first index

        Returns:
            TransactionPage with the values in API order (newest first)

        Raises:
            BankAPIError: If the API call fails or the payload is malformed
        """
        data = await self.bank_client.fetch_transactions(account_id, paging)

        raw_paging = data.get("paging") or {}
        raw_values = data.get("values") or []
        if not isinstance(raw_values, list):
            raise BankAPIError("Transactions payload has no 'values' list")

        try:
            values = tuple(self._map_to_domain_entity(raw_txn) for raw_txn in raw_values)
            page_paging = Paging(
                index=int(raw_paging.get("index") or 0),
                matches=int(raw_paging.get("matches") or 0),
            )
        except (AttributeError, TypeError, ValueError, InvalidOperation) as e:
            raise BankAPIError(f"Malformed transactions payload: {str(e)}") from e

        return TransactionPage(values=values, paging=page_paging)

    def _map_to_domain_entity(self, raw_txn: dict[str, Any]) -> Transaction:
        """
        Map a raw API transaction dictionary to a domain Transaction entity.

        The booking date is kept as text; it is parsed (and validated) where
        it is used, so a bad date surfaces as a DateParseError.
        """
        raw_amount = raw_txn.get("amount") or {}
        raw_type = raw_txn.get("transactionType") or {}

        return Transaction(
            booking_date=str(raw_txn.get("bookingDate") or ""),
            booking_status=BookingStatus.parse(raw_txn.get("bookingStatus")),
            transaction_type=TransactionType(
                key=str(raw_type.get("key") or ""),
                text=str(raw_type.get("text") or ""),
            ),
            amount=Amount(
                value=Decimal(str(raw_amount.get("value") or "0")),
                unit=str(raw_amount.get("unit") or ""),
            ),
            remitter_name=_holder_name(raw_txn, "remitter"),
            debtor_name=_holder_name(raw_txn, "debtor"),
            creditor_name=_holder_name(raw_txn, "creditor"),
            remittance_info=str(raw_txn.get("remittanceInfo") or ""),
            reference=str(raw_txn.get("reference") or ""),
            valuta_date=str(raw_txn.get("valutaDate") or ""),
            end_to_end_reference=str(raw_txn.get("endToEndReference") or ""),
            new_transaction=bool(raw_txn.get("newTransaction") or False),
        )
