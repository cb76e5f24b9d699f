"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain filtering or paging logic (delegate to the engine)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
