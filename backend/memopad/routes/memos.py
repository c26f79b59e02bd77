"""
MemoPad Backend — Memo Route Handlers
=======================================

What:  The /memos resource: create, list, get, full update, title update, delete.
How:   Each handler extracts the path id / JSON body, delegates to MemoService,
       and returns the shaped result. Errors raised by the service are turned
       into bodiless 400/404 responses by the handlers in main.py.
Who:   Any HTTP client speaking JSON.

Endpoint Inventory:
    POST   /memos          → 201 + memo
    GET    /memos          → 200 + [memo, ...]
    GET    /memos/{id}     → 200 + memo | 404
    PUT    /memos/{id}     → 200 + memo | 400 | 404
    PATCH  /memos/{id}     → 200 + memo | 400 | 404
    DELETE /memos/{id}     → 200        | 404
"""

from typing import List

from fastapi import APIRouter, Depends, Response

from memopad.schemas.memo import MemoRequest, MemoResponse
from memopad.services.memo_service import MemoService, get_memo_service

router = APIRouter(prefix="/memos", tags=["Memos"])

_NOT_FOUND = {404: {"description": "Memo not found (empty body)"}}
_BAD_REQUEST = {400: {"description": "Required field missing or forbidden field present (empty body)"}}


@router.post(
    "",
    status_code=201,
    response_model=MemoResponse,
    responses=_BAD_REQUEST,
    summary="Create a memo",
    description="Stores a new memo. Both title and contents are optional.",
)
async def create_memo(
    payload: MemoRequest,
    service: MemoService = Depends(get_memo_service),
) -> MemoResponse:
    return service.create_memo(payload)


@router.get(
    "",
    response_model=List[MemoResponse],
    summary="List all memos",
    description="Returns every memo currently held in memory, in no guaranteed order.",
)
async def list_memos(
    service: MemoService = Depends(get_memo_service),
) -> List[MemoResponse]:
    return service.list_memos()


@router.get(
    "/{memo_id}",
    response_model=MemoResponse,
    responses=_NOT_FOUND,
    summary="Get a single memo",
)
async def get_memo(
    memo_id: int,
    service: MemoService = Depends(get_memo_service),
) -> MemoResponse:
    return service.get_memo(memo_id)


@router.put(
    "/{memo_id}",
    response_model=MemoResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Replace a memo's title and contents",
    description="Both title and contents must be present in the body.",
)
async def update_memo(
    memo_id: int,
    payload: MemoRequest,
    service: MemoService = Depends(get_memo_service),
) -> MemoResponse:
    return service.update_memo(memo_id, payload)


@router.patch(
    "/{memo_id}",
    response_model=MemoResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Change a memo's title",
    description="The body must carry title and must not carry contents.",
)
async def update_memo_title(
    memo_id: int,
    payload: MemoRequest,
    service: MemoService = Depends(get_memo_service),
) -> MemoResponse:
    return service.update_title(memo_id, payload)


@router.delete(
    "/{memo_id}",
    status_code=200,
    response_class=Response,
    responses={200: {"description": "Memo deleted (empty body)"}, **_NOT_FOUND},
    summary="Delete a memo",
)
async def delete_memo(
    memo_id: int,
    service: MemoService = Depends(get_memo_service),
) -> Response:
    service.delete_memo(memo_id)
    return Response(status_code=200)
