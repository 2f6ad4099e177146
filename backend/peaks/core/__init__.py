"""Core Layer - pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Query and validation functions are pure and deterministic

Design Decisions:
    - Functional core separated from the imperative shell: the repository owns
      state and locking, core owns the rules applied to it
"""
