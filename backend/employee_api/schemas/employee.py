"""
Employee List Backend — Pydantic Request/Response Schemas
===========================================================

What:  Pydantic models defining the API contract between frontend and backend.
Why:   Field-level presence and type validation at the HTTP boundary, before
       anything reaches the storage layer, plus OpenAPI doc generation.
How:   FastAPI validates request bodies against EmployeeCreate/EmployeeUpdate
       and serializes responses through EmployeeResponse.

Wire format of the identifier:
    The frontend reads and sends the identifier as `_id`. Responses are
    serialized with `_id`; request bodies accept `_id` or `id`.
"""

import uuid
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


# Accept "_id" (what the frontend sends) or "id" on input
ID_ALIASES = AliasChoices("_id", "id")


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class EmployeeCreate(BaseModel):
    """
    What:  Body of POST /api/employeelist.
    Rules: All four fields are required; strings must be non-blank (surrounding
           whitespace is stripped) and salary must be a finite number.
           Unknown keys (including any client-sent id) are ignored.

    Example:
        {"name": "Alice", "location": "NY", "position": "Engineer", "salary": 90000}
    """
    model_config = {"str_strip_whitespace": True}

    name: str = Field(min_length=1, max_length=255, description="Employee full name")
    location: str = Field(min_length=1, max_length=255, description="Work location")
    position: str = Field(min_length=1, max_length=255, description="Job title")
    salary: float = Field(allow_inf_nan=False, description="Salary amount")


class EmployeeUpdate(EmployeeCreate):
    """
    What:  Body of PUT /api/employeelist.
    Rules: Full replacement. The identifier plus all four fields are required;
           there are no partial/patch semantics.
    """
    id: uuid.UUID = Field(
        validation_alias=ID_ALIASES,
        description="Identifier of the employee to overwrite",
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class EmployeeResponse(BaseModel):
    """
    What:  Full representation of a stored employee.
    Who:   Returned by every employee route except DELETE.
    """
    id: uuid.UUID = Field(
        validation_alias=ID_ALIASES,
        serialization_alias="_id",
        description="Unique employee identifier (UUID)",
    )
    name: str
    location: str
    position: str
    salary: float


class DeleteResponse(BaseModel):
    """Confirmation returned by DELETE /api/employeelist/{id}."""
    message: str = Field(default="Employee deleted successfully")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "Employee not found",
            "details": null,
            "request_id": "1f3a9c2e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response.
    Who:   Returned by GET /health.

    dbState is the integer connection-state code of the store handle
    (0 disconnected, 1 connected, 2 connecting, 3 disconnecting).
    """
    status: str = Field(description="ok when the store is reachable, degraded otherwise")
    dbState: int = Field(description="Store connection-state code")
    database: str = Field(description="connected, disconnected, unreachable or disabled")
    version: str = Field(description="Application version")
    uptime_seconds: float = Field(description="Seconds since service started")
