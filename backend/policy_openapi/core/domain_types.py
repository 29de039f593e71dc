"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RouteKey is the literal path template used as a key in the route table
    - PathPrefix is prepended verbatim (no slash normalization)
    - DESIGNATED_ROUTE is the only route that receives mandatory parameters
    - All parameter locations encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: values match the OpenAPI `in` field, serialize without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

RouteKey = NewType("RouteKey", str)
PathPrefix = NewType("PathPrefix", str)


# ─── Constants ───────────────────────────────────────────────────

DESIGNATED_ROUTE: RouteKey = RouteKey("/graph")


# ─── Enums ───────────────────────────────────────────────────────

class ParameterLocation(str, Enum):
    """OpenAPI parameter locations — only QUERY is injectable."""
    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    COOKIE = "cookie"


class EntryKind(str, Enum):
    """Tags for the Reference-or-Item union."""
    REFERENCE = "reference"
    ITEM = "item"
