from dataclasses import dataclass

PAGING_COUNT_QUERY_KEY = "paging-count"
PAGING_FIRST_QUERY_KEY = "paging-first"


@dataclass(frozen=True)
class PagingOptions:
    count: int
    first: int = 0

    def as_query(self) -> dict[str, str]:
        return {
            PAGING_COUNT_QUERY_KEY: str(self.count),
            PAGING_FIRST_QUERY_KEY: str(self.first),
        }
