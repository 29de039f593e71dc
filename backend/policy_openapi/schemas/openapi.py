"""OpenAPI Schemas — Pydantic models for the parts of an OpenAPI v3 document we rewrite.

Invariants:
    - Only `paths` and path-level `parameters` are modelled; everything else is
      preserved verbatim as extra fields (operations, info, components, ...)
    - PathEntry is Reference | PathItem, tagged by presence of `$ref`
    - ParameterEntry is Reference | Query | Header | Path | Cookie, tagged by `$ref` then `in`
    - Field aliases match the wire names (`in`, `$ref`, `schema`)

Design Decisions:
    - Callable Discriminator over left-to-right union: a `$ref` entry can never be
      mistaken for an item with extra keys (ADR: tagged unions at the boundary)
    - extra="allow" over a full OpenAPI model: the document is served, not validated
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter

from policy_openapi.core.domain_types import EntryKind, ParameterLocation


_PASSTHROUGH = ConfigDict(extra="allow", populate_by_name=True)


class Reference(BaseModel):
    """Indirection to a shared definition elsewhere in the document."""
    model_config = _PASSTHROUGH

    ref: str = Field(alias="$ref")


# ─── Parameters ──────────────────────────────────────────────────

class ParameterData(BaseModel):
    """Fields shared by every parameter location."""
    model_config = _PASSTHROUGH

    name: str
    required: bool = False
    schema_: dict[str, Any] | None = Field(default=None, alias="schema")


class QueryParameter(ParameterData):
    location: Literal["query"] = Field(alias="in")


class HeaderParameter(ParameterData):
    location: Literal["header"] = Field(alias="in")


class PathParameter(ParameterData):
    location: Literal["path"] = Field(alias="in")


class CookieParameter(ParameterData):
    location: Literal["cookie"] = Field(alias="in")


def _parameter_tag(value: Any) -> str | None:
    if isinstance(value, dict):
        if "$ref" in value:
            return EntryKind.REFERENCE.value
        return value.get("in")
    if isinstance(value, Reference):
        return EntryKind.REFERENCE.value
    return getattr(value, "location", None)


ParameterEntry = Annotated[
    Union[
        Annotated[Reference, Tag(EntryKind.REFERENCE.value)],
        Annotated[QueryParameter, Tag(ParameterLocation.QUERY.value)],
        Annotated[HeaderParameter, Tag(ParameterLocation.HEADER.value)],
        Annotated[PathParameter, Tag(ParameterLocation.PATH.value)],
        Annotated[CookieParameter, Tag(ParameterLocation.COOKIE.value)],
    ],
    Discriminator(_parameter_tag),
]

parameter_adapter: TypeAdapter = TypeAdapter(ParameterEntry)


# ─── Paths ───────────────────────────────────────────────────────

class PathItem(BaseModel):
    """Concrete route entry. Operations (get, post, ...) are kept as extras."""
    model_config = _PASSTHROUGH

    parameters: list[ParameterEntry] = Field(default_factory=list)


def _path_tag(value: Any) -> str:
    if isinstance(value, dict):
        is_ref = "$ref" in value
    else:
        is_ref = isinstance(value, Reference)
    return EntryKind.REFERENCE.value if is_ref else EntryKind.ITEM.value


PathEntry = Annotated[
    Union[
        Annotated[Reference, Tag(EntryKind.REFERENCE.value)],
        Annotated[PathItem, Tag(EntryKind.ITEM.value)],
    ],
    Discriminator(_path_tag),
]


class OpenAPIDocument(BaseModel):
    """An OpenAPI v3 document. Top-level keys other than `paths` pass through untouched."""
    model_config = _PASSTHROUGH

    openapi: str
    paths: dict[str, PathEntry] = Field(default_factory=dict)
