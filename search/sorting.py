from enum import Enum
from typing import Callable, Optional

from search.errors import InvalidSortFieldError, InvalidSortDirectionError
from models.user import User

ALLOWED_SORT_FIELDS = ("Name", "Id", "Age")

Comparator = Callable[[User, User], int]

class SortField(Enum):
    NAME = "Name"
    ID = "Id"
    AGE = "Age"

class SortDirection(Enum):
    DESC = -1
    NONE = 0
    ASC = 1

def _compare_name(a: User, b: User) -> int:
    return (a.name > b.name) - (a.name < b.name)

def _compare_id(a: User, b: User) -> int:
    return a.id - b.id

def _compare_age(a: User, b: User) -> int:
    return a.age - b.age

FIELD_COMPARATORS: dict[SortField, Comparator] = {
    SortField.NAME: _compare_name,
    SortField.ID: _compare_id,
    SortField.AGE: _compare_age,
}

# Direction predicate: given a signed comparison, does the first operand sort first?
DIRECTION_PREDICATES: dict[SortDirection, Callable[[int], bool]] = {
    SortDirection.ASC: lambda n: n < 0,
    SortDirection.DESC: lambda n: n > 0,
}

def resolve_field(order_field: str) -> SortField:
    """
    Map a raw order field to a SortField. An empty field sorts by name.
    """
    if not order_field:
        return SortField.NAME
    if order_field not in ALLOWED_SORT_FIELDS:
        raise InvalidSortFieldError(details={"order_field": order_field})
    return SortField(order_field)

def resolve_direction(order_by: int) -> SortDirection:
    try:
        return SortDirection(order_by)
    except ValueError:
        raise InvalidSortDirectionError(
            f"Invalid order direction: {order_by}",
            details={"order_by": order_by}
        ) from None

def choose_comparator(order_field: str, order_by: int) -> Optional[Comparator]:
    """
    Return a comparator for (order_field, order_by), or None when the
    original order must be kept.

    The field is checked before the direction, so an unknown field is
    reported even when order_by is 0.
    """
    field = resolve_field(order_field)
    direction = resolve_direction(order_by)

    if direction is SortDirection.NONE:
        return None

    compare = FIELD_COMPARATORS[field]
    is_less = DIRECTION_PREDICATES[direction]

    def comparator(a: User, b: User) -> int:
        if is_less(compare(a, b)):
            return -1
        if is_less(compare(b, a)):
            return 1
        return 0

    return comparator
