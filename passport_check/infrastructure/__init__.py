"""Infrastructure Layer — input loading and cross-cutting concerns.

Invariants:
    - Infrastructure imports only errors from core/, never validation logic
    - All IO failures mapped to typed PassportCheckError subclasses
"""
