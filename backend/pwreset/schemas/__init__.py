"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input)
    - Credential fields are StrictStr: numbers or booleans are rejected, never coerced
"""
