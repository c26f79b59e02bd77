# Services package init
"""
MemoPad Backend — Services Layer
==================================

Service Inventory:
    - MemoService: per-operation field rules over a MemoStore, plus the
      get_memo_service FastAPI dependency that resolves it from app.state.
"""
