"""Append-only audit records for resolutions.

Each record pairs what was suggested with what was chosen so resolutions can
be traced later. Writing the record is the storage layer's job.

Records are deeply immutable: the suggestion and the chosen verdict are kept
as frozen models, and the JSON payloads handed to storage are rebuilt on
every access.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from catalog_resolver.models.candidate import CandidateReference
from catalog_resolver.models.enums import EntityType
from catalog_resolver.models.verdict import ResolutionVerdict


class AuditedSuggestion(BaseModel):
    """The mention as the extractor suggested it."""

    model_config = ConfigDict(frozen=True)

    label: str
    entity_type: EntityType
    raw_value: str | None = None


class ResolutionAuditEntry(BaseModel):
    """One audit row."""

    model_config = ConfigDict(frozen=True)

    organization_id: str
    user_id: str
    task_temp_id: str | None = None
    suggestion: AuditedSuggestion
    chosen: ResolutionVerdict

    @property
    def suggestion_payload(self) -> dict[str, Any]:
        """JSON-ready suggestion; a fresh dict on every call."""
        return self.suggestion.model_dump(mode="json", exclude_none=True)

    @property
    def chosen_payload(self) -> dict[str, Any]:
        """JSON-ready verdict; a fresh dict on every call."""
        return self.chosen.to_payload()

    def to_record(self) -> dict[str, Any]:
        """Row shape for the audit table."""
        return {
            "organization_id": self.organization_id,
            "user_id": self.user_id,
            "task_temp_id": self.task_temp_id,
            "suggestion_payload": self.suggestion_payload,
            "chosen_payload": self.chosen_payload,
        }


def audit_entry_for(
    candidate: CandidateReference,
    verdict: ResolutionVerdict,
    *,
    organization_id: str,
    user_id: str,
    task_temp_id: str | None = None,
) -> ResolutionAuditEntry:
    """Build the audit record for one resolved candidate.

    Args:
        candidate: The mention as suggested.
        verdict: The pipeline's decision for it.
        organization_id: Owning organization.
        user_id: User the resolution happened for.
        task_temp_id: Draft task the mention came from, if any.
    """
    return ResolutionAuditEntry(
        organization_id=organization_id,
        user_id=user_id,
        task_temp_id=task_temp_id,
        suggestion=AuditedSuggestion(
            label=candidate.label,
            entity_type=candidate.kind,
            raw_value=candidate.raw_value,
        ),
        chosen=verdict,
    )
