"""API Layer — FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Action results translated to HTTP only in action_responses.py

Design Decisions:
    - Thin routes delegate to services (functional core, imperative shell)
"""
