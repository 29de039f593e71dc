"""Core Layer — pure document transformations, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Functions are deterministic; mutation is explicit and documented per function

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
