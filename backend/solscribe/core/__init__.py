"""Core Layer — pure value parsing and instruction encoding, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the HTTP shell (ADR: impureim sandwich)
"""
