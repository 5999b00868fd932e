"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas describe the wire contract; format rules live in core/validate_user
    - Domain types from core/ supply the declared patterns and limits

Design Decisions:
    - Separate from core values: schemas are API contracts, UserRecord is the
      registry's value type
"""
