"""Pydantic Schemas - request/response shapes for the movies endpoints.

Invariants:
    - Schemas check types at the system boundary; business shape rules live in core/validation.py

Design Decisions:
    - Separate from core.Movie: schemas are API contracts, Movie is the stored record
"""
