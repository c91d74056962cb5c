from functools import cmp_to_key
from typing import Iterable, List, Sequence

from search.errors import InvalidParameterError, OffsetOutOfRangeError
from models.user import User
from search.request import SearchRequest
from search.sorting import choose_comparator

def matches(user: User, query: str) -> bool:
    """
    A user matches when the full name equals the query exactly, or the
    about text contains it. An empty query therefore matches everyone.
    """
    return user.name == query or query in user.about

def filter_users(users: Iterable[User], query: str) -> List[User]:
    return [u for u in users if matches(u, query)]

def paginate(users: Sequence[User], limit: int, offset: int) -> List[User]:
    page = list(users[offset:])
    if limit > 0:
        page = page[:limit]
    return page

def search(users: Sequence[User], request: SearchRequest) -> List[User]:
    """
    Filter, sort and paginate `users` according to `request`.

    Stages run in a fixed order: parameter checks, filter, offset bound
    check, comparator resolution, stable sort, offset/limit slicing.
    Any failure raises a SearchError subclass and no partial result is produced.
    """
    if request.offset < 0:
        raise InvalidParameterError("Invalid offset", details={"offset": request.offset})

    if request.limit < 0:
        raise InvalidParameterError("Invalid limit", details={"limit": request.limit})

    filtered = filter_users(users, request.query)

    if request.offset > len(filtered):
        raise OffsetOutOfRangeError(
            details={"offset": request.offset, "total_hits": len(filtered)}
        )

    comparator = choose_comparator(request.order_field, request.order_by)

    if comparator is not None:
        # sorted() is stable: equal keys keep their filter order
        filtered = sorted(filtered, key=cmp_to_key(comparator))

    return paginate(filtered, request.limit, request.offset)
