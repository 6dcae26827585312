from datetime import date

from domain.entities import TransactionPage


class DateFilter:
    @staticmethod
    def filter_since(page: TransactionPage, since: date) -> TransactionPage:
        """
        Keep the transactions booked on or after `since`.

        Non-booked transactions without a booking date are kept: pending
        bookings are always newer than the booked ones. Paging metadata is
        carried over unchanged.

        Raises:
            DateParseError: If a booking date cannot be parsed
        """
        kept = []
        for t in page.values:
            booked_on = t.parsed_booking_date()
            if booked_on is None or booked_on >= since:
                kept.append(t)
        return TransactionPage(values=tuple(kept), paging=page.paging)
