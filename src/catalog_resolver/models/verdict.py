"""Resolution verdicts: the pipeline's output for one candidate reference."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from catalog_resolver.models.enums import EntityType, ResolutionSource, VerdictStatus


class VerdictCandidate(BaseModel):
    """A plausible catalog record offered for disambiguation."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    entity_type: EntityType


class ResolutionVerdict(BaseModel):
    """Decision about one candidate: resolved, ambiguous, or missing.

    A verdict carries a catalog id only when it is resolved. Consumers must
    never persist an ambiguous or missing verdict as a link.
    """

    model_config = ConfigDict(frozen=True)

    status: VerdictStatus
    entity_type: EntityType
    entity_id: str | None = None
    """Resolved catalog id (resolved only)."""

    source: ResolutionSource | None = None
    """How the link was established (resolved only)."""

    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    """Pipeline trust for resolved verdicts; best similarity for ambiguous ones."""

    candidates: tuple[VerdictCandidate, ...] = ()
    """Plausible records, best first (ambiguous only)."""

    @model_validator(mode="after")
    def _check_status_fields(self) -> ResolutionVerdict:
        if self.status == VerdictStatus.RESOLVED:
            if self.entity_id is None or self.source is None:
                raise ValueError("resolved verdict requires entity_id and source")
            if self.candidates:
                raise ValueError("resolved verdict cannot carry candidates")
        else:
            if self.entity_id is not None or self.source is not None:
                raise ValueError(f"{self.status.value} verdict cannot carry a catalog id")
            if self.status == VerdictStatus.AMBIGUOUS and len(self.candidates) < 2:
                raise ValueError("ambiguous verdict requires at least two candidates")
            if self.status == VerdictStatus.MISSING and self.candidates:
                raise ValueError("missing verdict cannot carry candidates")
        return self

    @classmethod
    def resolved(
        cls,
        entity_type: EntityType,
        entity_id: str,
        *,
        source: ResolutionSource,
        confidence: float,
    ) -> ResolutionVerdict:
        return cls(
            status=VerdictStatus.RESOLVED,
            entity_type=entity_type,
            entity_id=entity_id,
            source=source,
            confidence=confidence,
        )

    @classmethod
    def ambiguous(
        cls,
        entity_type: EntityType,
        candidates: list[VerdictCandidate],
        *,
        confidence: float,
    ) -> ResolutionVerdict:
        return cls(
            status=VerdictStatus.AMBIGUOUS,
            entity_type=entity_type,
            candidates=tuple(candidates),
            confidence=confidence,
        )

    @classmethod
    def missing(cls, entity_type: EntityType) -> ResolutionVerdict:
        return cls(status=VerdictStatus.MISSING, entity_type=entity_type)

    @property
    def is_resolved(self) -> bool:
        return self.status == VerdictStatus.RESOLVED

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict without fields that do not apply to the status."""
        return self.model_dump(mode="json", exclude_none=True)
