"""Core Layer — pure domain logic, no IO, no async, no web framework.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Parsing and Swagger assembly are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (collaborators live in services/)
"""
