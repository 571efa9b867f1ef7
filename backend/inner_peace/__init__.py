"""
Inner Peace Backend — Application Package Initializer
=====================================================

What: Marks the `inner_peace` directory as a Python package.
Who:  Imported by uvicorn (`inner_peace.main:app`), Alembic, and pytest.

Architecture Note:
    The backend keeps the usual thin layering:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │       Services (Business Logic)     │  ← validation, admin check, SQL
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
