"""Pydantic Schemas: validation at the system boundaries.

Invariants:
    - upstream.py validates what the HP API sends us
    - catalog.py describes what the JSON API sends out

Design Decisions:
    - Separate from core types: schemas are wire contracts, core types are domain values
"""
