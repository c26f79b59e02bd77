"""
MemoPad Backend — Memo Service
================================

What:  Applies per-operation field rules and shapes MemoStore results into
       MemoResponse objects.
How:   Presence checks run BEFORE the store is touched, so a rejected request
       never reads or mutates a memo. Store errors (NotFoundError) propagate
       unchanged to the global handlers in main.py.
Who:   Called by routes/memos.py via the get_memo_service dependency.

Field Rules:
    create        title?, contents?      (anything goes)
    update (PUT)  title AND contents     both must be present
    patch         title, NOT contents    title present, contents absent
"""

import logging
from typing import List

from fastapi import Request

from memopad.exceptions import ValidationError
from memopad.models.memo import Memo
from memopad.schemas.memo import MemoRequest, MemoResponse
from memopad.store import MemoStore

logger = logging.getLogger(__name__)


class MemoService:
    """
    Request-level operations over a MemoStore.

    The store is injected at construction; the service itself holds no state.
    """

    def __init__(self, store: MemoStore):
        self.store = store

    @staticmethod
    def _to_response(memo: Memo) -> MemoResponse:
        return MemoResponse(id=memo.id, title=memo.title, contents=memo.contents)

    def create_memo(self, request: MemoRequest) -> MemoResponse:
        """Store a new memo; absent fields are kept as None."""
        memo = self.store.create(title=request.title, contents=request.contents)
        logger.info("Created memo %d", memo.id)
        return self._to_response(memo)

    def list_memos(self) -> List[MemoResponse]:
        return [self._to_response(memo) for memo in self.store.find_all()]

    def get_memo(self, memo_id: int) -> MemoResponse:
        return self._to_response(self.store.find_by_id(memo_id))

    def update_memo(self, memo_id: int, request: MemoRequest) -> MemoResponse:
        """
        Full replace of title and contents.

        Raises:
            ValidationError: title or contents missing (→ 400)
            NotFoundError:   memo_id not in the store (→ 404)
        """
        if request.title is None or request.contents is None:
            missing = "title" if request.title is None else "contents"
            logger.debug("Rejected full update of memo %d: %s missing", memo_id, missing)
            raise ValidationError(
                message="Both title and contents are required",
                field=missing,
                context={"memo_id": memo_id},
            )

        memo = self.store.replace_fields(memo_id, request.title, request.contents)
        logger.info("Updated memo %d", memo.id)
        return self._to_response(memo)

    def update_title(self, memo_id: int, request: MemoRequest) -> MemoResponse:
        """
        Title-only update.

        Raises:
            ValidationError: title missing, or contents supplied (→ 400)
            NotFoundError:   memo_id not in the store (→ 404)
        """
        if request.title is None:
            logger.debug("Rejected title update of memo %d: title missing", memo_id)
            raise ValidationError(
                message="title is required",
                field="title",
                context={"memo_id": memo_id},
            )
        if request.contents is not None:
            logger.debug("Rejected title update of memo %d: contents present", memo_id)
            raise ValidationError(
                message="contents must not be sent with a title-only update",
                field="contents",
                context={"memo_id": memo_id},
            )

        memo = self.store.replace_title(memo_id, request.title)
        logger.info("Updated title of memo %d", memo.id)
        return self._to_response(memo)

    def delete_memo(self, memo_id: int) -> None:
        self.store.delete(memo_id)
        logger.info("Deleted memo %d", memo_id)


# ── Dependency ────────────────────────────────────────────────────────────
def get_memo_service(request: Request) -> MemoService:
    """
    FastAPI dependency returning the MemoService built by create_app().

    Example usage in a route:
        @router.get("/memos")
        async def list_memos(service: MemoService = Depends(get_memo_service)):
            return service.list_memos()
    """
    return request.app.state.memo_service
