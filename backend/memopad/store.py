"""
MemoPad Backend — In-Memory Memo Store
========================================

What:  The single owner of every Memo: a dict keyed by id plus the id policy.
How:   One threading.Lock guards the dict and the id assignment; every public
       method takes the lock for its whole body and never awaits inside it.
Who:   Constructed once by create_app() and handed to MemoService.
When:  Lives for the process lifetime; contents vanish when the process exits.

Id Strategies:
    max_plus_one (default):
        empty store → 1, otherwise max(existing ids) + 1.
        Deleting the highest id and creating again hands that id out again.
    sequence:
        monotonic counter starting at 1; ids are never reused.

    Both are computed under the same lock as the insert, so two concurrent
    creates can never receive the same id.
"""

import logging
import threading
from typing import Dict, List, Optional

from memopad.exceptions import NotFoundError
from memopad.models.memo import Memo

logger = logging.getLogger(__name__)

ID_STRATEGIES = ("max_plus_one", "sequence")


class MemoStore:
    """
    Thread-safe in-memory mapping of memo id → Memo.

    Every operation is a single atomic map access; there are no intermediate
    states. Lookups of unknown ids raise NotFoundError.
    """

    def __init__(self, id_strategy: str = "max_plus_one"):
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown id_strategy '{id_strategy}'. Must be one of: {ID_STRATEGIES}"
            )
        self.id_strategy = id_strategy
        self._memos: Dict[int, Memo] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._memos)

    def __contains__(self, memo_id: object) -> bool:
        with self._lock:
            return memo_id in self._memos

    # ── Id Assignment ─────────────────────────────────────────────────────
    def _next_id(self) -> int:
        # Caller must hold self._lock
        if self.id_strategy == "sequence":
            self._last_id += 1
            return self._last_id
        return max(self._memos) + 1 if self._memos else 1

    def _get_or_raise(self, memo_id: int) -> Memo:
        # Caller must hold self._lock
        memo = self._memos.get(memo_id)
        if memo is None:
            raise NotFoundError(resource="memo", resource_id=memo_id)
        return memo

    # ── CRUD ──────────────────────────────────────────────────────────────
    def create(self, title: Optional[str] = None, contents: Optional[str] = None) -> Memo:
        """
        Insert a new memo and return it. Always succeeds.

        No validation: either field may be None or empty.
        """
        with self._lock:
            memo = Memo(id=self._next_id(), title=title, contents=contents)
            self._memos[memo.id] = memo
            total = len(self._memos)
        logger.debug("Stored memo %d (%d total)", memo.id, total)
        return memo

    def find_by_id(self, memo_id: int) -> Memo:
        """Return the memo with this id, or raise NotFoundError."""
        with self._lock:
            return self._get_or_raise(memo_id)

    def find_all(self) -> List[Memo]:
        """Return a snapshot list of every memo. Order is not part of the contract."""
        with self._lock:
            return list(self._memos.values())

    def replace_fields(
        self, memo_id: int, title: Optional[str], contents: Optional[str]
    ) -> Memo:
        """Overwrite title and contents of an existing memo; never creates one."""
        with self._lock:
            memo = self._get_or_raise(memo_id)
            memo.update(title, contents)
            return memo

    def replace_title(self, memo_id: int, title: Optional[str]) -> Memo:
        """Overwrite only the title of an existing memo."""
        with self._lock:
            memo = self._get_or_raise(memo_id)
            memo.update_title(title)
            return memo

    def delete(self, memo_id: int) -> None:
        """Remove the memo with this id, or raise NotFoundError."""
        with self._lock:
            self._get_or_raise(memo_id)
            del self._memos[memo_id]

    # ── Housekeeping ──────────────────────────────────────────────────────
    def count(self) -> int:
        return len(self)

    def clear(self) -> None:
        """Drop every memo and restart id assignment from 1."""
        with self._lock:
            self._memos.clear()
            self._last_id = 0
