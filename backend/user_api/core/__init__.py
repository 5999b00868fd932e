"""Core Layer — user validation rules and the in-memory registry.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - Validation functions are pure and deterministic
    - UserRegistry is the only holder of mutable state

Design Decisions:
    - Functional core separated from the FastAPI shell: routes translate
      core outcomes into HTTP responses, core never knows about HTTP
"""
