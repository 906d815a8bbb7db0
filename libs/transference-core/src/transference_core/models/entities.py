"""Core entities for the matching domain.

Entities are mutable: the feedback engine appends artifact themes and decays a
creator's expectation profile in place.
"""

from pydantic import BaseModel, Field

from transference_core.models.identifiers import ArtifactId, CreatorId, ReceiverId


class Artifact(BaseModel):
    """A piece of content produced by a creator and offered to receivers."""

    id: ArtifactId = Field(min_length=1)
    quality_score: float = 0.0
    vector: list[float] = []
    themes: list[str] = []


class Creator(BaseModel):
    """The producer of artifacts, carrying an expectation profile that adapts to feedback."""

    id: CreatorId = Field(min_length=1)
    expectation_profile: list[float] = []
    artifact_history: list[Artifact] = []
    feedback_loop_enabled: bool = False

    @property
    def historical_themes(self) -> set[str]:
        """Every theme of every artifact this creator has produced before."""
        return {theme for past in self.artifact_history for theme in past.themes}


class Receiver(BaseModel):
    """A candidate audience for an artifact. Never mutated by the engine."""

    id: ReceiverId = Field(min_length=1)
    value_vector: list[float] = []
    sentiment_profile: list[str] = []
    reputation_score: float = 0.0
    interaction_history: list[CreatorId] = []

    def interactions_with(self, creator_id: CreatorId) -> int:
        """Number of times ``creator_id`` appears in this receiver's history."""
        return sum(1 for seen in self.interaction_history if seen == creator_id)
