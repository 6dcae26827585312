class BankAPIError(Exception):
    """Raised when the bank API cannot serve a request (HTTP error, timeout, network, bad payload)."""


class DateParseError(ValueError):
    """Raised when a booking date coming from the bank API is not an ISO date."""

    def __init__(self, value: str, reference: str = ""):
        self.value = value
        self.reference = reference
        where = f" (transaction {reference})" if reference else ""
        super().__init__(f"Failed to parse booking date {value!r}{where}")


class RemittanceEncodingError(ValueError):
    """Raised when a fixed-width remittance line is malformed."""
