"""
Backend Learning API — Middleware Package
==========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Wildcard Origin] → [CORS] → [Error Handler] → [Body Parser] → [Access Log] → Route Handler

    Why this order:
    1. CORS outermost: every response, including 500s, carries CORS headers;
       with CORS_ORIGINS="*" the wildcard layer adds the header even to
       requests that send no Origin
    2. Error Handler: catches failures from body parsing and from handlers
    3. Body Parser: decodes JSON / URL-encoded bodies before dispatch
    4. Access Log: one line per request on arrival, whatever happens next

    404s never reach the error handler: FastAPI raises them inside the router
    and the not-found handler registered in main.py answers them there.
"""
