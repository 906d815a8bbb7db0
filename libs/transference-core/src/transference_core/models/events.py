"""Events emitted to a sink while an artifact is offered and evolved."""

from datetime import UTC, datetime
from typing import Literal

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from transference_core.models.enums import EventKind
from transference_core.models.identifiers import ArtifactId, CreatorId, ReceiverId


def _utcnow() -> datetime:
    return datetime.now(UTC)


class OfferEvent(BaseModel):
    """Published once per ranked receiver an artifact is offered to."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[EventKind.OFFER] = EventKind.OFFER
    artifact_id: ArtifactId
    receiver_id: ReceiverId
    rank: int = Field(ge=1)
    combined_score: float
    timestamp: AwareDatetime = Field(default_factory=_utcnow)

    def render(self) -> str:
        return f"Offering '{self.artifact_id}' to receiver '{self.receiver_id}'."


class EvolutionEvent(BaseModel):
    """Published each time the feedback loop evolves an artifact and its creator."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[EventKind.EVOLUTION] = EventKind.EVOLUTION
    artifact_id: ArtifactId
    creator_id: CreatorId
    applied_tag: str
    adaptation_rate: float = Field(gt=0.0, le=1.0)
    theme_count: int = Field(ge=1)
    timestamp: AwareDatetime = Field(default_factory=_utcnow)

    def render(self) -> str:
        return "[LOG] Artifact evolved via resonance."


EngineEvent = OfferEvent | EvolutionEvent
