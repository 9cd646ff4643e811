"""Infrastructure Layer - database session management and structured logging.

Invariants:
    - Infrastructure never imports from services/ or api/
"""
