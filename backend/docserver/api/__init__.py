"""API Layer — FastAPI routes, request context and error handlers.

Invariants:
    - Routes registered explicitly by main.create_app (no auto-discovery)
    - Collaborators injected at registration time, never looked up globally

Design Decisions:
    - Thin routes delegate to services through core/collaborator_protocols.py
"""
