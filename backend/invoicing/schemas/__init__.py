"""Pydantic Schemas — form validation and coercion at the system boundary.

Invariants:
    - Schemas validate raw form input before any action touches a store
    - validate() turns schema failures into ValidationFailure instead of raising

Design Decisions:
    - Separate from models: schemas are form contracts, models are persistence
"""
