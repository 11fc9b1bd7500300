"""Services Layer — concrete collaborators behind the documentation routes.

Invariants:
    - Services implement the Protocols in core/collaborator_protocols.py
    - Filesystem IO happens here, parsing delegates to core/
"""
