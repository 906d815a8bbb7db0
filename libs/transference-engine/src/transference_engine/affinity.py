"""Affinity scoring: social bond and shared meaning between a creator and a receiver.

The transference value multiplies the two, so thematic overlap only counts
when the receiver has some interaction history with the creator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from transference_engine.config import default_config

if TYPE_CHECKING:
    from transference_core.models.entities import Artifact, Creator, Receiver
    from transference_engine.config import EngineConfig


def social_bond(creator: Creator, receiver: Receiver, config: EngineConfig | None = None) -> float:
    """Interactions with the creator, capped at ``bond_cap`` and normalized to [0, 1]."""
    config = config or default_config()
    count = receiver.interactions_with(creator.id)
    return min(count, config.bond_cap) / config.bond_cap


def shared_meaning(
    artifact: Artifact,
    creator: Creator,
    receiver: Receiver,
    config: EngineConfig | None = None,
) -> float:
    """Count of artifact themes known to the creator's history or the receiver's sentiments.

    Each entry of ``artifact.themes`` is tested for membership once, so a theme
    repeated across the creator's history does not count twice. The count is
    capped at ``meaning_cap``.
    """
    config = config or default_config()
    connected = creator.historical_themes | set(receiver.sentiment_profile)
    count = sum(1 for theme in artifact.themes if theme in connected)
    return float(min(count, config.meaning_cap))


def combine_transference(bond: float, meaning: float) -> float:
    """Product of a social bond and a shared meaning; no bond means no transference."""
    if bond == 0.0:
        return 0.0
    return bond * meaning


def transference_value(
    artifact: Artifact,
    creator: Creator,
    receiver: Receiver,
    config: EngineConfig | None = None,
) -> float:
    """Social bond times shared meaning. Zero when the receiver never engaged the creator."""
    config = config or default_config()
    bond = social_bond(creator, receiver, config)
    if bond == 0.0:
        return 0.0
    return combine_transference(bond, shared_meaning(artifact, creator, receiver, config))
