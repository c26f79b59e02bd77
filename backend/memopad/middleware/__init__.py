# Middleware package init
"""
MemoPad Backend — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the logging middleware and the exception
    handlers can read the id from request_id_var.
"""
