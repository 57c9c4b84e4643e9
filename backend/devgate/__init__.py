"""devgate — secrets service with a development-only diagnostic gateway.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
