"""Infrastructure Layer: external service clients and cross-cutting concerns.

Invariants:
    - All external calls wrapped with timeout and error mapping (UpstreamUnavailableError)

Design Decisions:
    - Wrappers over raw clients (ADR: single responsibility)
"""
