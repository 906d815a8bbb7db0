"""Transference domain model: re-exports all public types."""

from transference_core.models.entities import (
    Artifact,
    Creator,
    Receiver,
)
from transference_core.models.enums import (
    DimensionPolicy,
    EventKind,
    NanPolicy,
)
from transference_core.models.events import (
    EngineEvent,
    EvolutionEvent,
    OfferEvent,
)
from transference_core.models.identifiers import (
    ArtifactId,
    CreatorId,
    ReceiverId,
)
from transference_core.models.values import (
    RankedCandidate,
    ScoreBreakdown,
)

__all__ = [
    # Identifiers
    "ArtifactId",
    "CreatorId",
    "ReceiverId",
    # Enums
    "DimensionPolicy",
    "EventKind",
    "NanPolicy",
    # Entities
    "Artifact",
    "Creator",
    "Receiver",
    # Value Objects
    "RankedCandidate",
    "ScoreBreakdown",
    # Events
    "EngineEvent",
    "EvolutionEvent",
    "OfferEvent",
]
