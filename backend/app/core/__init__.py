"""Core Layer: pure domain logic, no IO, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - Filter and paginate functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
