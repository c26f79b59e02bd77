"""
MemoPad Backend — Application Package Initializer
==================================================

What: Marks the `memopad` directory as a Python package.
Who:  Used by uvicorn (`uvicorn memopad.main:app`), pytest, and `python -m memopad`.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     MemoService (presence checks)   │  ← Input rules, response shaping
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Memo record + Pydantic contracts
    ├─────────────────────────────────────┤
    │        MemoStore (in-memory)        │  ← Locked dict, id assignment
    └─────────────────────────────────────┘

    Nothing is persisted: the store lives exactly as long as the process.
"""

__version__ = "1.0.0"
