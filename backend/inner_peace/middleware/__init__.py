# Middleware package init
"""
Inner Peace Backend — Middleware Package
=========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [CORS] → [Path Normalization] → Router

    1. Request ID: correlation id for logs and the X-Request-ID header
    2. Logging: one access line per request, with duration
    3. CORS: answers OPTIONS, adds CORS headers to everything else
    4. Path Normalization: drops empty path segments before routing

Responses travel back through the same chain in reverse.
"""
