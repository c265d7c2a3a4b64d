"""Pydantic Schemas — request decoding and response envelopes for API endpoints.

Invariants:
    - Schemas validate shape, JSON type and integer range at the system boundary
    - Key and signature text is NOT decoded here (core/parse_values owns that)

Design Decisions:
    - Separate request and response modules: requests are untrusted input,
      responses are the published contract (ADR: boundary clarity)
"""
