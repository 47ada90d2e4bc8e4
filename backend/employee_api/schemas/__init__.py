# Schemas package init
"""Pydantic request/response contracts for the HTTP API."""
