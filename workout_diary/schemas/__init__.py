"""Pydantic Schemas — read models for rendering the diary outside the process.

Invariants:
    - Schemas validate at the system boundary (console JSON output)
    - Domain constants from core/ used for field bounds

Design Decisions:
    - Separate from core: schemas are output contracts, entities are behaviour (ADR: DDD boundary)
"""
