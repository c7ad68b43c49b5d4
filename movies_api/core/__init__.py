"""Core Layer - movie record, validation gate and the record store.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Expected failures are returned as outcome values, never raised

Design Decisions:
    - Functional core separated from the HTTP shell: routes only map outcomes to responses
"""
