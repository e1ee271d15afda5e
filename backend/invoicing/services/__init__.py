"""Services Layer — the form actions (invoice create/update/delete, authenticate).

Invariants:
    - Services depend on core Protocols only, never on concrete infrastructure
    - One validated write (or one sign-in) per action invocation
"""
