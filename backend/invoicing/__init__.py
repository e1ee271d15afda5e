"""Invoicing Application Package — validated form actions for an invoices dashboard.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
