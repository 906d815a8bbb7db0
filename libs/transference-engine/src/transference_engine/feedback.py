"""Feedback engine: evolves an artifact and its creator after a successful offer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from transference_core.models.events import EvolutionEvent
from transference_engine.sinks import LoggingSink

if TYPE_CHECKING:
    from transference_core.models.entities import Artifact, Creator
    from transference_engine.sinks import EventSink

logger = logging.getLogger(__name__)

ADAPTATION_RATE = 0.99


def feedback_loop(
    creator: Creator,
    artifact: Artifact,
    feedback_tag: str,
    *,
    sink: EventSink | None = None,
) -> None:
    """Append ``feedback_tag`` to the artifact's themes and decay the creator's expectations.

    Themes only ever grow; every expectation component is multiplied by
    ADAPTATION_RATE. Calling this twice appends twice and decays twice. Any
    string is a valid tag, the empty string included.
    """
    event = EvolutionEvent(
        artifact_id=artifact.id,
        creator_id=creator.id,
        applied_tag=feedback_tag,
        adaptation_rate=ADAPTATION_RATE,
        theme_count=len(artifact.themes) + 1,
    )

    artifact.themes.append(feedback_tag)
    creator.expectation_profile[:] = [
        component * ADAPTATION_RATE for component in creator.expectation_profile
    ]
    logger.debug(
        "Artifact %s now carries %d themes after %r",
        artifact.id,
        len(artifact.themes),
        feedback_tag,
    )

    if sink is None:
        sink = LoggingSink()
    sink.emit(event)
