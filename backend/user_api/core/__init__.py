"""Core: pure domain types, validation rules and boundary contracts.

Invariants:
    - No IO, no async, no framework imports (except Protocol signatures)
    - Core never imports from api/, infrastructure/ or models/
"""
