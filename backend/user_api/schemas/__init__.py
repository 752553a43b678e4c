"""Pydantic Schemas: request/response shapes for API endpoints.

Invariants:
    - Schemas check request SHAPE only (types, UUID syntax)
    - Field rules (required, email syntax) live in core/validate_user.py

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
