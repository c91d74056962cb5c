import re
from pydantic import BaseModel, Field

from app.core.exceptions import BadParameterError
from search.request import SearchRequest

INT_PARAM = re.compile(r"[+-]?[0-9]+")

def parse_int_param(name: str, value: str | None) -> int:
    """
    Coerce a raw query parameter to int. Missing or empty means 0.

    Only plain ASCII integers are accepted: no whitespace, underscores
    or non-ASCII digits.
    """
    if value is None or value == "":
        return 0
    if not INT_PARAM.fullmatch(value):
        raise BadParameterError(
            f"Parameter {name} must be an integer",
            details={name: value}
        )
    return int(value)

class SearchQuery(BaseModel):
    query: str = Field(
        default="",
        description="Exact full name, or a substring of the about text"
    )

    order_field: str = Field(
        default="",
        description="One of Name, Id, Age. Empty sorts by Name"
    )

    # Numeric params stay strings here so that parse errors surface as
    # BAD_PARAMETER rather than as FastAPI's own validation error.
    order_by: str = Field(
        default="",
        description="1 ascending, -1 descending, 0 keeps the original order"
    )

    limit: str = Field(
        default="",
        description="Maximum number of users, 0 for no limit"
    )

    offset: str = Field(
        default="",
        description="Number of matching users to skip"
    )

    def to_request(self) -> SearchRequest:
        return SearchRequest(
            query=self.query,
            order_field=self.order_field,
            order_by=parse_int_param("order_by", self.order_by),
            limit=parse_int_param("limit", self.limit),
            offset=parse_int_param("offset", self.offset),
        )
