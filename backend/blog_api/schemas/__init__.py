"""API Schemas: Pydantic response shapes exposed at the HTTP boundary.

Invariants:
    - Schemas never mirror storage columns one-to-one; they carry only exposed fields
    - Timestamps and UUIDs are strings here, never datetime / UUID objects
"""
