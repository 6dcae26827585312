from typing_extensions import Protocol
from domain.entities import PagingOptions, TransactionPage


class TransactionRepository(Protocol):
    async def get_transactions(self, account_id: str, paging: PagingOptions) -> TransactionPage: ...
