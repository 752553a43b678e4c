"""API Layer: FastAPI routes, request gate and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes are the only place where outcomes become HTTP status codes
"""
