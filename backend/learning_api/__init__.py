"""
Backend Learning API — Application Package Initializer
=======================================================

What: Marks the `learning_api` directory as a Python package.
Why:  Enables module imports like `from learning_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The service is deliberately small and layered:

    ┌─────────────────────────────────────┐
    │  Middleware (CORS, errors, body,    │  ← cross-cutting, every request
    │  access log)                        │
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │  Services (runtime info, DB probe)  │  ← injected collaborators
    ├─────────────────────────────────────┤
    │  Models & Schemas (Data)            │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
