"""Infrastructure Layer — cross-cutting concerns of the console shell.

Invariants:
    - Infrastructure never imports from core/ domain logic

Design Decisions:
    - Logging setup lives here, not in core/: core only emits records
"""
