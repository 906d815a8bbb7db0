"""Frozen value objects produced by the scoring and ranking engine."""

from pydantic import BaseModel, ConfigDict, Field

from transference_core.models.entities import Receiver


class ScoreBreakdown(BaseModel):
    """Every term that contributed to one receiver's combined score.

    ``combined`` may be NaN when a vector carries non-finite components; the
    ranking engine decides where such scores land.
    """

    model_config = ConfigDict(frozen=True)

    content_similarity: float
    sentiment_alignment: float = Field(ge=0.0, le=1.0)
    resonance: float
    social_bond: float = Field(ge=0.0, le=1.0)
    shared_meaning: float = Field(ge=0.0)
    transference: float
    combined: float


class RankedCandidate(BaseModel):
    """A receiver at its position in a ranking, with the score that put it there."""

    model_config = ConfigDict(frozen=True)

    rank: int = Field(ge=1)
    receiver: Receiver
    breakdown: ScoreBreakdown

    @property
    def combined_score(self) -> float:
        return self.breakdown.combined
