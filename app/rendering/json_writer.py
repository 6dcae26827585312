from typing import TextIO

from app.schemas.transaction_schema import AccountTransactionsResponse
from domain.entities import FetchResult


class JsonWriter:
    """Indented JSON of the whole fetched record set, in the bank API's field names."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def write(self, stream: TextIO, result: FetchResult) -> None:
        payload = AccountTransactionsResponse.from_result(result)
        stream.write(payload.model_dump_json(by_alias=True, indent=self.indent))
        stream.write("\n")
