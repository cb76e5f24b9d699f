"""Services Layer: the catalog retrieval engine.

Invariants:
    - Services orchestrate IO (CharacterSource) around pure core functions
"""
