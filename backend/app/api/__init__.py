"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - JSON endpoints and HTML views share one engine and one set of error handlers

Design Decisions:
    - Thin routes delegate to the engine (ADR: impureim sandwich)
"""
