"""Solscribe Package — stateless Solana instruction-description API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
    - __version__ is the single source of the published version

Design Decisions:
    - No re-exports: explicit imports only, no star exports
"""

__version__ = "0.1.0"
