"""Services Layer — request handlers and cryptographic operations.

Invariants:
    - Handlers are instantiated per request with the current Settings
    - Handlers parse, build/sign, then wrap: no partial results

Design Decisions:
    - One handler class per resource, max ~3 methods each (ADR: no god objects)
"""
