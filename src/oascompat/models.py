"""Canonical Pydantic models shared across all oascompat modules.

This is the single source of truth for data shapes in the project. The models
fall into three groups:

**Parser output models** -- produced by the ingestion gate and the
required-data projection:
    :class:`ErrorReason`, :class:`ParseOutcome`, and :class:`RequiredData`.

**Schema models** -- the normalized view of a JSON Schema ``type`` keyword:
    :class:`ScalarType`, :class:`UnionType`, and the :data:`TypeSpec` tagged
    union.

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`Settings`.

Schema nodes and content maps themselves stay plain ``dict`` objects so that
JSON Schema keywords this package does not know about pass through verbatim.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# --- Parser output ---


class ErrorReason(str, enum.Enum):
    """Closed set of human-readable reasons a spec failed to parse.

    The values are part of the observable contract: downstream consumers match
    on the literal sentence, so they must never be reworded.
    """

    INVALID_FORMAT = "Invalid format. Input must be in YAML or JSON format."
    MISSING_INFO = (
        "Specification must contain an Info Object for the meta-data of the API"
    )


class ParseOutcome(BaseModel):
    """Tagged result of :func:`~oascompat.parser.spec_parser.parse_spec`.

    Exactly one variant is populated: ``ok=True`` carries the full decoded
    ``document``; ``ok=False`` carries a ``reason`` from :class:`ErrorReason`.

    Example::

        outcome = parse_spec(text)
        if outcome.ok:
            data = get_required_data(outcome.document)
        else:
            print(outcome.reason.value)
    """

    ok: bool
    document: Optional[dict[Any, Any]] = None
    reason: Optional[ErrorReason] = None

    @model_validator(mode="after")
    def _check_variant(self) -> ParseOutcome:
        if self.ok and (self.document is None or self.reason is not None):
            raise ValueError("a successful outcome carries a document and no reason")
        if not self.ok and (self.reason is None or self.document is not None):
            raise ValueError("a failed outcome carries a reason and no document")
        return self

    @classmethod
    def success(cls, document: dict[Any, Any]) -> ParseOutcome:
        """Build the ``ok=True`` variant."""
        return cls(ok=True, document=document)

    @classmethod
    def failure(cls, reason: ErrorReason) -> ParseOutcome:
        """Build the ``ok=False`` variant."""
        return cls(ok=False, reason=reason)


class RequiredData(BaseModel):
    """The subset of top-level objects a converter needs from a spec.

    Exactly four fields; unknown keys are rejected so that callers enumerating
    ``model_dump()`` never see extras. ``webhooks`` defaults to an empty list
    when the document has none.
    """

    model_config = ConfigDict(extra="forbid")

    info: dict[str, Any]
    paths: dict[str, Any] = Field(default_factory=dict)
    webhooks: Union[list[Any], dict[str, Any]] = Field(default_factory=list)
    components: dict[str, Any] = Field(default_factory=dict)


# --- Schema types ---


class ScalarType(BaseModel):
    """A single JSON Schema type name, e.g. ``"string"``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    name: str

    def contains(self, type_name: str) -> bool:
        return self.name == type_name

    def members(self) -> list[str]:
        return [self.name]


class UnionType(BaseModel):
    """A JSON Schema 2020-12 union, e.g. ``["string", "null"]``.

    ``order`` keeps the declaration order for callers that need a preferred
    member; membership checks go through ``names`` only.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["union"] = "union"
    names: frozenset[str]
    order: tuple[str, ...] = ()

    def contains(self, type_name: str) -> bool:
        return type_name in self.names

    def members(self) -> list[str]:
        return list(self.order) if self.order else sorted(self.names)


TypeSpec = Annotated[Union[ScalarType, UnionType], Field(discriminator="kind")]
"""Either a :class:`ScalarType` or a :class:`UnionType`, tagged by ``kind``."""


# --- Configuration ---


class Settings(BaseModel):
    """User settings stored in ``config.json`` under the config directory.

    See Also:
        :func:`~oascompat.config.load_settings` for file and environment
        precedence.
    """

    # Each level is two JSON nesting levels once rendered; 400 stays under the
    # encoder's recursion limit.
    max_schema_depth: int = Field(
        default=256,
        ge=1,
        le=400,
        description="Maximum nesting depth the example normalizer will walk",
    )
    output_format: str = Field(
        default="auto", description="Default output format: auto, json, plain, rich"
    )
