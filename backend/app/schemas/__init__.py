"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Wire format is camelCase; snake_case accepted on input

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
    - Cross-reference ids arrive as raw strings: format policy (lenient/strict)
      is applied by core/references.py, not by the schema
"""
