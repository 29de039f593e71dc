"""Template Store — holds the canonical OpenAPI template shipped with the package.

Invariants:
    - The canonical template is the raw asset TEXT: an immutable str, never a parsed object
    - load() parses on every call, so each caller gets an independent working document
    - A malformed asset raises TemplateCorruptionError from load(), never at construction

Design Decisions:
    - Parse-per-request over clone-of-parsed: no shared mutable object exists to alias,
      and no cross-request cache of transformed output (ADR: injection is not idempotent)
    - get_template_store() is cached (lru_cache) — asset read once per process
"""

import logging
from functools import lru_cache
from importlib.resources import files

from policy_openapi.core.document_codec import parse_document
from policy_openapi.schemas.openapi import OpenAPIDocument

logger = logging.getLogger(__name__)

TEMPLATE_ASSET = "assets/openapiv3.json"


class TemplateStore:
    """Immutable holder of the template text."""

    def __init__(self, raw: str):
        self._raw = raw

    @classmethod
    def from_package(cls, asset: str = TEMPLATE_ASSET) -> "TemplateStore":
        """Read the template bundled inside the policy_openapi package."""
        raw = files("policy_openapi").joinpath(asset).read_text(encoding="utf-8")
        logger.info(f"Loaded OpenAPI template {asset} ({len(raw)} bytes)")
        return cls(raw)

    @property
    def raw(self) -> str:
        return self._raw

    def load(self) -> OpenAPIDocument:
        """Parse the template into a fresh working document."""
        return parse_document(self._raw)


@lru_cache
def get_template_store() -> TemplateStore:
    return TemplateStore.from_package()
