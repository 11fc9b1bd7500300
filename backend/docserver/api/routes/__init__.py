"""Route Modules — one file per resource/concern.

Invariants:
    - Each module exposes either an APIRouter or a register function
    - Routes never contain business logic (delegate to collaborators)
"""
