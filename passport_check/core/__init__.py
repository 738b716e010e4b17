"""Core Layer — pure domain logic, no IO, no logging, no threads.

Invariants:
    - No module in core/ imports from services/, infrastructure/, or main
    - All functions are pure and deterministic
    - Validation outcomes are booleans; only corrupt input raises

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
