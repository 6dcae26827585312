"""
Row Projector

Maps Transaction entities to display rows (tuples of strings) for a given
column schema. Both table and CSV output go through here so that the two
formats always agree on column content.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from domain.entities import Transaction
from domain.services.remittance import decode_remittance

DisplayRow = tuple[str, ...]

DESCRIPTION_WIDTH = 30
PLACEHOLDER = "N/A"


@dataclass(frozen=True)
class ColumnSchema:
    name: str
    headers: tuple[str, ...]
    # Index of the amount column, right-aligned in tables
    value_column: int

    def __len__(self) -> int:
        return len(self.headers)


DESCRIPTION_SCHEMA = ColumnSchema(
    name="description",
    headers=("DESCRIPTION", "BOOKING DATE", "STATUS", "TYPE", "VALUE", "UNIT"),
    value_column=4,
)

SPLIT_SCHEMA = ColumnSchema(
    name="split",
    headers=("REMITTER", "DEBTOR", "BOOKING DATE", "STATUS", "INFO", "TYPE", "VALUE", "UNIT"),
    value_column=6,
)

SCHEMAS = {schema.name: schema for schema in (DESCRIPTION_SCHEMA, SPLIT_SCHEMA)}


def _truncate(text: str, enabled: bool) -> str:
    return text[:DESCRIPTION_WIDTH] if enabled else text


def describe(transaction: Transaction, decode: Callable[[Optional[str]], str]) -> str:
    """Remitter, creditor and decoded remittance info, separated by single spaces."""
    parts = [transaction.remitter_name, transaction.creditor_name, decode(transaction.remittance_info)]
    return " ".join(p for p in parts if p)


def project(
    transaction: Transaction,
    schema: ColumnSchema,
    truncate: bool = False,
    decode: Optional[Callable[[Optional[str]], str]] = None,
) -> DisplayRow:
    """
    Build the display row of a transaction.

    Args:
        transaction: The transaction to project
        schema: DESCRIPTION_SCHEMA or SPLIT_SCHEMA
        truncate: Cut the description (or remitter) to DESCRIPTION_WIDTH characters
        decode: Remittance decoder, defaults to the silent module decoder

    Returns:
        Tuple of strings, one per schema header
    """
    if decode is None:
        decode = decode_remittance

    booking_date = transaction.booking_date
    status = transaction.booking_status.value
    type_text = transaction.transaction_type.text
    value = transaction.amount.formatted()
    unit = transaction.amount.unit

    if schema.name == SPLIT_SCHEMA.name:
        remitter = _truncate(transaction.remitter_name, truncate) or PLACEHOLDER
        debtor = transaction.debtor_name or transaction.creditor_name or PLACEHOLDER
        info = decode(transaction.remittance_info)
        return (remitter, debtor, booking_date, status, info, type_text, value, unit)

    description = _truncate(describe(transaction, decode), truncate)
    return (description, booking_date, status, type_text, value, unit)


def project_rows(
    transactions: Iterable[Transaction],
    schema: ColumnSchema,
    truncate: bool = False,
    decode: Optional[Callable[[Optional[str]], str]] = None,
) -> list[DisplayRow]:
    """Project the BOOKED transactions only; everything else is left out of tabular output."""
    return [project(t, schema, truncate=truncate, decode=decode) for t in transactions if t.is_booked]
