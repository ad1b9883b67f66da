"""
Backend Learning API — API Routes Package
==========================================

Route Inventory:
    - system.py:   GET /                (health check)
                   GET /info            (runtime information)
    - db_test.py:  GET /db-test         (database connectivity probe)
    - docs.py:     GET /api-docs        (Swagger UI)
      (GET /api-docs.json is served by FastAPI itself, see main.create_app)

Design Principle:
    Every path also matches with one trailing slash (/info/), declared as an
    undocumented twin route. Anything else, including a wrong method on a
    twin, falls through to the 404 handler.

    Routes are THIN: they pull collaborators from dependencies, call one
    service function, and return its result. Anything unmatched falls
    through to the not-found handler in main.py.
"""
