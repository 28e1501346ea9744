"""Core Layer — pure hashing logic, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
    - The 1024-round wide-digest loop lives in services/ because it must yield
      to the event loop; everything it composes lives here
"""
