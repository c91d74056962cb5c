from dataclasses import dataclass

@dataclass(frozen=True)
class SearchRequest:
    query: str = ""
    order_field: str = ""
    order_by: int = 0
    limit: int = 0
    offset: int = 0
