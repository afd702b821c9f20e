"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (query strings, JSON bodies, responses)
    - Enum fields reuse core/ types

Design Decisions:
    - Separate from core/: schemas are API contracts, core values are frozen dataclasses
"""
