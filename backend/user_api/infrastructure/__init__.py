"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - All SQLAlchemy exceptions are mapped to the DatabaseError family before leaving
"""
