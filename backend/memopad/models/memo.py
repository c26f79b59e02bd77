"""
MemoPad Backend — Memo Record
==============================

What:  The stored memo record held by MemoStore.
Who:   Created and mutated only by MemoStore; read by MemoService to build responses.

Lifecycle:
    1. Created by MemoStore.create() with an id assigned by the store
    2. Mutated in place by update() (PUT) or update_title() (PATCH)
    3. Removed by MemoStore.delete(); never persisted anywhere
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Memo:
    """
    A single memo.

    `id` is assigned once by the store and never changes; title and contents
    may be None when the client omitted them at creation.
    """

    # ── Identity ──────────────────────────────────────────────────────────
    id: int

    # ── Content ───────────────────────────────────────────────────────────
    title: Optional[str] = None
    contents: Optional[str] = None

    def __setattr__(self, name, value):
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Memo.id is immutable once assigned")
        super().__setattr__(name, value)

    def update(self, title: Optional[str], contents: Optional[str]) -> None:
        """Replace both title and contents unconditionally."""
        self.title = title
        self.contents = contents

    def update_title(self, title: Optional[str]) -> None:
        """Replace the title only; contents are left untouched."""
        self.title = title
