"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary; domain rules live in core/

Design Decisions:
    - Separate from core.peak: schemas are API contracts, Peak is the domain record
"""
