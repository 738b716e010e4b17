"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services own IO, logging and worker pools; core/ owns every verdict
"""
