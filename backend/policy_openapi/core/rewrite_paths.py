"""Path Rewriting — mount every route of a document under a deployment prefix.

Invariants:
    - rewrite_paths is PURE: returns a new dict, the input mapping is never modified
    - Every output key is prefix + original key, exactly once (cardinality preserved)
    - Entries are carried over by identity — no copy, no mutation
"""

import logging
from typing import Mapping, TypeVar

from policy_openapi.core.domain_types import PathPrefix

logger = logging.getLogger(__name__)

Entry = TypeVar("Entry")


def rewrite_paths(paths: Mapping[str, Entry], path_prefix: PathPrefix) -> dict[str, Entry]:
    """Return a new route table with every key prefixed by path_prefix."""
    rewritten: dict[str, Entry] = {}
    for path, entry in paths.items():
        new_path = f"{path_prefix}{path}"
        logger.debug(f"Rewrote path {path} -> {new_path}")
        rewritten[new_path] = entry
    return rewritten
