"""Infrastructure Layer — cross-cutting concerns for the shells.

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
