"""Doomsday Package — weekday finder for Gregorian dates, explained step by step.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
