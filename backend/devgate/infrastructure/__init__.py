"""Infrastructure Layer — database session management and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures mapped to DatabaseError before leaving this layer
"""
