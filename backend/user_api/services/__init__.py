"""Services Layer: orchestration between the HTTP handlers and the repository.

Invariants:
    - Services hold no per-request state
    - Validation happens here, before any repository write
"""
