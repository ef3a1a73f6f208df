"""
EduLibrary Backend — Application Package Initializer
====================================================

What: Marks the `edulibrary` directory as a Python package.
Who:  Imported by uvicorn (`uvicorn edulibrary.main:app`), Alembic and pytest.

Architecture Note:
    The backend is layered the same way top to bottom:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, not-found, error wrapping
    ├─────────────────────────────────────┤
    │          Schemas (API contract)     │  ← Pydantic models + payload validation
    ├─────────────────────────────────────┤
    │     Storage (memory | database)     │  ← ResourceStorage implementations
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
