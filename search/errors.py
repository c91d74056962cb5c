class SearchError(Exception):
    code = "SEARCH_ERROR"
    message = "Search failed"
    status_code = 400

    def __init__(self, message: str | None = None, details=None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)

class InvalidParameterError(SearchError):
    code = "INVALID_PARAMETER"
    message = "Offset and limit must not be negative"

class OffsetOutOfRangeError(SearchError):
    code = "OFFSET_OUT_OF_RANGE"
    message = "Offset out of range"

class InvalidSortFieldError(SearchError):
    code = "INVALID_SORT_FIELD"
    message = "Wrong order field"

class InvalidSortDirectionError(SearchError):
    code = "INVALID_SORT_DIRECTION"
    message = "Invalid order direction"
