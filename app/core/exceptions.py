from search.errors import (  # noqa: F401
    SearchError,
    InvalidParameterError,
    OffsetOutOfRangeError,
    InvalidSortFieldError,
    InvalidSortDirectionError,
)

class BadParameterError(SearchError):
    code = "BAD_PARAMETER"
    message = "Request parameter could not be parsed"

class AccessDeniedError(SearchError):
    code = "BAD_ACCESS_TOKEN"
    message = "Bad access token"
    status_code = 401

class DatasetError(Exception):
    pass
