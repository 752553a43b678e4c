"""User API Package: CRUD backend for the single User entity.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
