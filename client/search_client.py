from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import httpx

from models.user import User, InvalidUserError
from search.request import SearchRequest

MAX_CLIENT_LIMIT = 25

CONNECT_TIMEOUT_SEC = 0.5
READ_TIMEOUT_SEC = 1.0

class ClientError(Exception):
    pass

class ClientTimeoutError(ClientError):
    pass

class ClientAuthError(ClientError):
    pass

class ClientServerError(ClientError):
    pass

class ClientBadRequestError(ClientError):
    def __init__(self, code: str, message: str, details: Any = None):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)

@dataclass
class SearchResult:
    users: List[User] = field(default_factory=list)
    next_page: bool = False

class SearchClient:
    """
    HTTP client for the /search/ endpoint.

    Asks the server for one record more than requested to learn whether a
    next page exists, and trims that extra record from the result.
    """
    def __init__(
            self,
            access_token: str,
            url: str,
            timeout: Optional[httpx.Timeout] = None,
            transport: Optional[httpx.BaseTransport] = None
    ):
        self.access_token = access_token
        self.url = url.rstrip("/")
        self.timeout = timeout or httpx.Timeout(READ_TIMEOUT_SEC, connect=CONNECT_TIMEOUT_SEC)
        self.transport = transport

    def _params(self, req: SearchRequest, limit: int) -> Dict[str, Any]:
        return {
            "query": req.query,
            "order_field": req.order_field,
            "order_by": req.order_by,
            "limit": limit,
            "offset": req.offset,
        }

    def _get(self, params: Dict[str, Any]) -> httpx.Response:
        headers = {"AccessToken": self.access_token}
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                return client.get(f"{self.url}/search/", params=params, headers=headers)
        except httpx.TimeoutException as e:
            raise ClientTimeoutError(f"Timeout for {params}") from e
        except httpx.HTTPError as e:
            raise ClientError(f"Unknown error {type(e).__name__}: {e}") from e

    def _decode(self, resp: httpx.Response) -> Dict[str, Any]:
        try:
            body = resp.json()
        except ValueError as e:
            raise ClientError(f"Can't unpack response json (status {resp.status_code})") from e
        if not isinstance(body, dict):
            raise ClientError(f"Unexpected response body: {body!r}")
        return body

    def _raise_for_status(self, resp: httpx.Response) -> None:
        if resp.status_code == 401:
            raise ClientAuthError("Bad AccessToken")

        if resp.status_code >= 500:
            raise ClientServerError("SearchServer fatal error")

        if resp.status_code == 400:
            error = self._decode(resp).get("error") or {}
            code = error.get("code", "")
            message = error.get("message", "")
            details = error.get("details")

            if not code:
                raise ClientError("Unknown bad request error")
            if code == "INVALID_SORT_FIELD":
                order_field = (details or {}).get("order_field", "")
                message = f"OrderField {order_field} invalid"
            raise ClientBadRequestError(code, message, details)

        if resp.status_code != 200:
            raise ClientError(f"Unexpected status code {resp.status_code}")

    def find_users(self, req: SearchRequest) -> SearchResult:
        if req.limit < 0:
            raise ClientError("limit must be >= 0")
        if req.offset < 0:
            raise ClientError("offset must be >= 0")

        limit = min(req.limit, MAX_CLIENT_LIMIT)
        if limit == 0:
            limit = MAX_CLIENT_LIMIT

        # one extra record tells us whether another page follows
        resp = self._get(self._params(req, limit + 1))
        self._raise_for_status(resp)

        data = self._decode(resp).get("data") or []
        try:
            users = [User.from_dict(row) for row in data]
        except InvalidUserError as e:
            raise ClientError(f"Can't unpack result json: {e}") from e

        if len(users) > limit:
            return SearchResult(users=users[:limit], next_page=True)
        return SearchResult(users=users, next_page=False)
