"""Ranking engine: filters eligible receivers and orders them by combined score."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from transference_core.models.enums import NanPolicy
from transference_core.models.values import RankedCandidate, ScoreBreakdown
from transference_engine.affinity import combine_transference, shared_meaning, social_bond
from transference_engine.config import default_config
from transference_engine.exceptions import UnorderableScoreError
from transference_engine.resonance import (
    blend_resonance,
    content_similarity,
    sentiment_alignment,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from transference_core.models.entities import Artifact, Creator, Receiver
    from transference_engine.config import EngineConfig

logger = logging.getLogger(__name__)


def is_eligible(receiver: Receiver, config: EngineConfig | None = None) -> bool:
    """A receiver is eligible when its reputation is strictly above the threshold."""
    config = config or default_config()
    return receiver.reputation_score > config.eligibility_threshold


def score_receiver(
    artifact: Artifact,
    creator: Creator,
    receiver: Receiver,
    config: EngineConfig | None = None,
) -> ScoreBreakdown:
    """Compute every scoring term for one receiver."""
    config = config or default_config()
    similarity = content_similarity(artifact, receiver, config)
    alignment = sentiment_alignment(artifact, receiver)
    resonance = blend_resonance(similarity, alignment, config)

    bond = social_bond(creator, receiver, config)
    meaning = shared_meaning(artifact, creator, receiver, config)
    transference = combine_transference(bond, meaning)

    return ScoreBreakdown(
        content_similarity=similarity,
        sentiment_alignment=alignment,
        resonance=resonance,
        social_bond=bond,
        shared_meaning=meaning,
        transference=transference,
        combined=resonance + transference,
    )


def _sort_key(scored: tuple[Receiver, ScoreBreakdown]) -> tuple[bool, float]:
    # NaN never compares, so it is keyed by a flag that places it after real scores.
    combined = scored[1].combined
    if math.isnan(combined):
        return True, 0.0
    return False, -combined


def rank_candidates(
    artifact: Artifact,
    creator: Creator,
    pool: Iterable[Receiver],
    *,
    top_k: int | None = None,
    config: EngineConfig | None = None,
) -> list[RankedCandidate]:
    """Rank eligible receivers by descending combined score.

    Equal scores keep their pool order. NaN scores either sort after every
    real score or raise UnorderableScoreError, depending on ``nan_policy``.
    A ``top_k`` below 1 raises ValueError before any receiver is scored.
    """
    if top_k is not None and top_k < 1:
        msg = f"top_k must be a positive integer, got {top_k}"
        raise ValueError(msg)
    config = config or default_config()

    scored: list[tuple[Receiver, ScoreBreakdown]] = []
    for receiver in pool:
        if not is_eligible(receiver, config):
            logger.debug(
                "Skipping receiver %s: reputation %.3f is not above %.3f",
                receiver.id,
                receiver.reputation_score,
                config.eligibility_threshold,
            )
            continue
        breakdown = score_receiver(artifact, creator, receiver, config)
        if math.isnan(breakdown.combined):
            if config.nan_policy is NanPolicy.REJECT:
                raise UnorderableScoreError(receiver.id, breakdown.combined)
            logger.warning(
                "Combined score for receiver %s is NaN; ranking it last", receiver.id
            )
        logger.debug(
            "Scored receiver %s for artifact %s: resonance=%.4f transference=%.4f",
            receiver.id,
            artifact.id,
            breakdown.resonance,
            breakdown.transference,
        )
        scored.append((receiver, breakdown))

    scored.sort(key=_sort_key)
    if top_k is not None:
        scored = scored[:top_k]

    return [
        RankedCandidate(rank=position, receiver=receiver, breakdown=breakdown)
        for position, (receiver, breakdown) in enumerate(scored, start=1)
    ]


def query_best_receivers(
    artifact: Artifact,
    creator: Creator,
    pool: Iterable[Receiver],
    *,
    top_k: int | None = None,
    config: EngineConfig | None = None,
) -> list[Receiver]:
    """Eligible receivers in rank order. The receivers are returned by reference."""
    candidates = rank_candidates(artifact, creator, pool, top_k=top_k, config=config)
    return [candidate.receiver for candidate in candidates]
