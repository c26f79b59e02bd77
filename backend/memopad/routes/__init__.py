# Routes package init
"""
MemoPad Backend — API Routes Package
======================================

Route Inventory:
    - memos.py:   POST/GET       /memos
                  GET/PUT/PATCH/DELETE /memos/{id}
    - health.py:  GET  /health

Routes are thin: they pull the path id and JSON body, call MemoService,
and return its result. Field rules live in the service.
"""
