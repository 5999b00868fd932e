"""Infrastructure Layer — process-wide singletons and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or schemas/
    - Singletons created during FastAPI lifespan, never at import time
"""
