"""Resonance scoring: content and sentiment alignment of one artifact with one receiver."""

from __future__ import annotations

from typing import TYPE_CHECKING

from transference_engine.config import default_config
from transference_engine.vectors import cosine_distance

if TYPE_CHECKING:
    from transference_core.models.entities import Artifact, Receiver
    from transference_engine.config import EngineConfig


def content_similarity(
    artifact: Artifact, receiver: Receiver, config: EngineConfig | None = None
) -> float:
    """One minus the cosine distance between the artifact vector and the receiver's values."""
    config = config or default_config()
    return 1.0 - cosine_distance(
        artifact.vector,
        receiver.value_vector,
        epsilon=config.epsilon,
        policy=config.dimension_policy,
    )


def sentiment_alignment(artifact: Artifact, receiver: Receiver) -> float:
    """Fraction of the receiver's sentiment tags that appear among the artifact's themes.

    A receiver without sentiment tags aligns at 0.0.
    """
    themes = set(artifact.themes)
    matched = sum(1 for tag in receiver.sentiment_profile if tag in themes)
    return matched / max(1, len(receiver.sentiment_profile))


def blend_resonance(similarity: float, alignment: float, config: EngineConfig) -> float:
    """Weighted sum of a content similarity and a sentiment alignment."""
    return config.content_weight * similarity + config.sentiment_weight * alignment


def evaluate_resonance(
    artifact: Artifact, receiver: Receiver, config: EngineConfig | None = None
) -> float:
    """Weighted blend of content similarity and sentiment alignment."""
    config = config or default_config()
    return blend_resonance(
        content_similarity(artifact, receiver, config),
        sentiment_alignment(artifact, receiver),
        config,
    )
