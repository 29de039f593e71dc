"""Document Codec — JSON text <-> OpenAPIDocument, with typed failures.

Invariants:
    - parse_document always returns a NEW object graph (no shared state with prior calls)
    - serialize_document emits only keys present in the source or explicitly set
    - Failures raise TemplateCorruptionError / DocumentSerializationError, never bare pydantic errors

Design Decisions:
    - exclude_unset on dump: defaults (required=False, parameters=[]) are not
      invented for entries that never declared them
"""

from pydantic import ValidationError

from policy_openapi.core.errors import DocumentSerializationError, TemplateCorruptionError
from policy_openapi.schemas.openapi import OpenAPIDocument


def parse_document(raw: str | bytes) -> OpenAPIDocument:
    """Parse JSON text into a fresh OpenAPIDocument."""
    try:
        return OpenAPIDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise TemplateCorruptionError(str(exc)) from exc


def serialize_document(document: OpenAPIDocument) -> str:
    """Render a document to its JSON wire form."""
    try:
        return document.model_dump_json(by_alias=True, exclude_unset=True)
    except ValueError as exc:
        raise DocumentSerializationError(str(exc)) from exc
