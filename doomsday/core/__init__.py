"""Core Layer — pure calendar arithmetic, no IO, no async, no wall clock.

Invariants:
    - No module in core/ imports from api/, schemas/, infrastructure/ or cli
    - All functions are pure and deterministic (randomness is injected)
    - Every value produced here is immutable

Design Decisions:
    - Functional core separated from imperative shell (API and trainer are thin)
"""
