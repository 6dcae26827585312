from decimal import Decimal

import pytest

from domain.entities import Amount, BookingStatus, Transaction, TransactionType


@pytest.fixture
def make_transaction():
    """Factory for Transaction entities with sensible defaults."""
    def _make(
        booking_date: str = "2021-01-15",
        status: BookingStatus = BookingStatus.BOOKED,
        value: str = "-10.00",
        unit: str = "EUR",
        type_text: str = "Lastschrift",
        remitter_name: str = "",
        debtor_name: str = "",
        creditor_name: str = "",
        remittance_info: str = "",
        reference: str = "REF",
    ) -> Transaction:
        return Transaction(
            booking_date=booking_date,
            booking_status=status,
            transaction_type=TransactionType(key="DIRECT_DEBIT", text=type_text),
            amount=Amount(value=Decimal(value), unit=unit),
            remitter_name=remitter_name,
            debtor_name=debtor_name,
            creditor_name=creditor_name,
            remittance_info=remittance_info,
            reference=reference,
        )
    return _make
