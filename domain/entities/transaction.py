from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from domain.exceptions import DateParseError

DATE_FORMAT = "%Y-%m-%d"


class BookingStatus(Enum):
    BOOKED = "BOOKED"
    NOTBOOKED = "NOTBOOKED"
    OTHER = "OTHER"

    @staticmethod
    def parse(value: Optional[str]) -> 'BookingStatus':
        try:
            return BookingStatus(str(value or "").upper())
        except ValueError:
            return BookingStatus.OTHER


@dataclass(frozen=True)
class Amount:
    value: Decimal
    unit: str

    def formatted(self) -> str:
        # keeps the precision the API sent ("12.50" stays "12.50")
        return format(self.value, "f")


@dataclass(frozen=True)
class TransactionType:
    key: str = ""
    text: str = ""


@dataclass(frozen=True)
class Transaction:
    booking_date: str
    booking_status: BookingStatus
    transaction_type: TransactionType
    amount: Amount
    remitter_name: str = ""
    debtor_name: str = ""
    creditor_name: str = ""
    remittance_info: str = ""
    reference: str = ""
    valuta_date: str = ""
    end_to_end_reference: str = ""
    new_transaction: bool = False

    @property
    def is_booked(self) -> bool:
        return self.booking_status is BookingStatus.BOOKED

    def parsed_booking_date(self) -> Optional[date]:
        """
        Parse the booking date.

        Returns None only for non-booked transactions without a date; a BOOKED
        transaction must always carry one.

        Raises:
            DateParseError: If the date is missing on a booked transaction or is not YYYY-MM-DD
        """
        if not self.booking_date and not self.is_booked:
            return None
        try:
            return datetime.strptime(self.booking_date, DATE_FORMAT).date()
        except (TypeError, ValueError) as e:
            raise DateParseError(self.booking_date, self.reference) from e


@dataclass(frozen=True)
class Paging:
    index: int = 0
    matches: int = 0


@dataclass(frozen=True)
class TransactionPage:
    values: tuple[Transaction, ...] = ()
    paging: Paging = field(default_factory=Paging)

    def __len__(self) -> int:
        return len(self.values)

    @property
    def last(self) -> Optional[Transaction]:
        return self.values[-1] if self.values else None
