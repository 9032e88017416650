"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (slugs, references, event status)

Design Decisions:
    - Functional core separated from imperative shell: the repositories in services/
      do the IO, core decides what to write
"""
