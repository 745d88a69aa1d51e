"""Core: pure projection and assembly logic, error hierarchy, domain types.

Invariants:
    - No IO in this package; nothing here awaits or touches the database
    - Core never imports from infrastructure or api
"""
