"""Domain Types: shared vocabulary for outcomes and directives.

Invariants:
    - OutcomeKind has exactly 4 members: one per resolver verdict
    - DirectiveKind has exactly 3 members: loading, error, valid
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - str Enums: directive kinds serialize to JSON as "loading" / "error" / "valid"
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

QueryKey = NewType("QueryKey", str)


# ─── Enums ───────────────────────────────────────────────────────

class OutcomeKind(str, Enum):
    """Verdict of resolving a single source against its validator."""
    PENDING = "pending"
    SOURCE_ERROR = "source_error"
    VALIDATION_ERROR = "validation_error"
    VALID = "valid"


class DirectiveKind(str, Enum):
    """What a caller should render after evaluating one or more sources."""
    LOADING = "loading"
    ERROR = "error"
    VALID = "valid"
