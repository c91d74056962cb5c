import logging
import os
from typing import List, Optional
from fastapi import APIRouter, Request, Response, Depends, Header
from app.core import config
from app.core.exceptions import AccessDeniedError
from app.models.search_query import SearchQuery
from app.models.api_response import APIResponse, Meta
from app.models.search_response import UserResult
from time import perf_counter

router = APIRouter()

def check_access_token(access_token: Optional[str] = Header(None, alias="AccessToken")):
    expected = config.access_token()
    if expected is not None and access_token != expected:
        raise AccessDeniedError()

@router.get("/", response_model=APIResponse[List[UserResult]], dependencies=[Depends(check_access_token)])
def search(
    request: Request,
    response: Response,
    query: SearchQuery = Depends()
    ):
    service = request.app.state.search_service

    request_id = request.headers.get("X-Request-Id") or os.urandom(6).hex()
    response.headers["X-Request-Id"] = request_id

    search_request = query.to_request()

    start_time = perf_counter()

    users = service.search(search_request)

    took_ms = (perf_counter() - start_time) * 1000

    logging.info(
        "request_id=%s query=%r order_field=%r order_by=%s limit=%s offset=%s hits=%d took_ms=%.2f",
        request_id,
        search_request.query,
        search_request.order_field,
        search_request.order_by,
        search_request.limit,
        search_request.offset,
        len(users),
        took_ms
    )

    return APIResponse(
        status="ok",
        data=[UserResult.from_user(u) for u in users],
        meta=Meta(
            limit=search_request.limit,
            offset=search_request.offset,
            total_hits=len(users),
            took_ms=round(took_ms, 2),
            request_id=request_id
        )
    )

@router.get("/health", response_model=APIResponse)
def health(request: Request):
    service = request.app.state.search_service

    return APIResponse(
        status="ok",
        data=service.health_check()
    )
