"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ModuleType has exactly two members: backend and frontend
    - ServerType has exactly two members: tenant and admin
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

ModuleId = NewType("ModuleId", str)
ResourceId = NewType("ResourceId", str)

DocEntry = dict[str, Any]


# ─── Enums ───────────────────────────────────────────────────────

class ModuleType(str, Enum):
    """Kinds of documented source modules."""
    BACKEND = "backend"
    FRONTEND = "frontend"


class ServerType(str, Enum):
    """Deployment contexts serving the same documentation API."""
    TENANT = "tenant"
    ADMIN = "admin"


class DocKind(str, Enum):
    """What a documentation entry describes."""
    MODULE = "module"
    CLASS = "class"
    FUNCTION = "function"
    COMMENT = "comment"
