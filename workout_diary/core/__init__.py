"""Core Layer — pure domain logic: entities, registers, validation. No IO.

Invariants:
    - No module in core/ imports from schemas/, infrastructure/, bootstrap or main
    - Every contract violation raises InvalidArgumentError at the call site

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
