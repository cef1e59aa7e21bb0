"""Candidate references: entity mentions proposed by the extraction step.

A candidate is a closed tagged variant, one model per entity type,
discriminated on ``entity_type``. Validation happens once at the boundary
(:func:`parse_candidate`); the resolver only ever receives well-formed
candidates.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from catalog_resolver.errors import ResolutionContractError
from catalog_resolver.models.catalog import ResolutionContext
from catalog_resolver.models.enums import EntityType
from catalog_resolver.utils.normalize import normalize


class _CandidateReferenceBase(BaseModel):
    """Fields shared by every candidate variant."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    label: str = Field(description="Mention text as extracted (e.g. 'kitchen', 'Frank')")
    raw_value: str | None = Field(
        default=None,
        description="Catalog id the extractor already knew, if any. Only used for exact lookup.",
    )
    property_id: str | None = Field(
        default=None,
        description="Restrict eligible catalog entries to this property",
    )
    space_id: str | None = Field(
        default=None,
        description="Restrict eligible catalog entries to this space",
    )

    @field_validator("label")
    @classmethod
    def _label_has_content(cls, value: str) -> str:
        if not normalize(value):
            raise ValueError("label must contain at least one letter or digit")
        return value

    @property
    def kind(self) -> EntityType:
        """The entity type as an enum member."""
        return EntityType(getattr(self, "entity_type"))

    @property
    def context(self) -> ResolutionContext:
        """Scoping context carried by this candidate."""
        return ResolutionContext(property_id=self.property_id, space_id=self.space_id)


class SpaceReference(_CandidateReferenceBase):
    entity_type: Literal["space"] = "space"


class PersonReference(_CandidateReferenceBase):
    entity_type: Literal["person"] = "person"


class TeamReference(_CandidateReferenceBase):
    entity_type: Literal["team"] = "team"


class AssetReference(_CandidateReferenceBase):
    entity_type: Literal["asset"] = "asset"


class CategoryReference(_CandidateReferenceBase):
    entity_type: Literal["category"] = "category"


class PropertyReference(_CandidateReferenceBase):
    entity_type: Literal["property"] = "property"


CandidateReference = Annotated[
    Union[
        SpaceReference,
        PersonReference,
        TeamReference,
        AssetReference,
        CategoryReference,
        PropertyReference,
    ],
    Field(discriminator="entity_type"),
]

_candidate_adapter: TypeAdapter[CandidateReference] = TypeAdapter(CandidateReference)


def is_candidate(value: object) -> bool:
    """Check whether a value is a validated candidate reference."""
    return isinstance(value, _CandidateReferenceBase)


def parse_candidate(data: Any) -> CandidateReference:
    """Validate extractor output into a candidate reference.

    Args:
        data: A mapping with ``entity_type``, ``label`` and optional
            ``raw_value``/``property_id``/``space_id``, or an already
            validated candidate (returned unchanged).

    Returns:
        The matching tagged variant.

    Raises:
        ResolutionContractError: Unknown entity type, empty label or
            otherwise malformed input.
    """
    if isinstance(data, _CandidateReferenceBase):
        return data  # type: ignore[return-value]

    if isinstance(data, dict) and isinstance(data.get("entity_type"), EntityType):
        data = {**data, "entity_type": data["entity_type"].value}

    try:
        return _candidate_adapter.validate_python(data)
    except ValidationError as exc:
        msg = f"Invalid candidate reference {data!r}: {exc}"
        raise ResolutionContractError(msg) from exc
