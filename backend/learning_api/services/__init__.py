"""
Backend Learning API — Services Package
========================================

What:  Collaborators the route handlers depend on.
How:   Each service is injected through a FastAPI dependency so tests can
       swap it for a stand-in.

Service Inventory:
    - db_client.py:  DatabaseClient interface + SQLAlchemy implementation
    - db_probe.py:   connectivity check + record counts for GET /db-test
    - runtime.py:    RuntimeContext and process introspection for GET /info
"""
