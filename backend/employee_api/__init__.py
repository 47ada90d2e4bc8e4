"""
Employee List Backend — Application Package
=============================================

What: FastAPI service exposing the employee list over HTTP.

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (Resource Handler)    │  ← not-found / error translation
    ├─────────────────────────────────────┤
    │     Repositories (Storage Adapter)  │  ← find_all, find_by_id, insert, save, delete
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │     Database (Store Handle)         │  ← connection state, sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
