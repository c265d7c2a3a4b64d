"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every JSON endpoint answers with the success/error envelope

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
