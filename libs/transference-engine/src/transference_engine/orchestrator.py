"""Offer orchestrator: drives one artifact through ranking, offers and feedback."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from transference_core.models.events import OfferEvent
from transference_engine.config import default_config
from transference_engine.feedback import feedback_loop
from transference_engine.ranking import rank_candidates
from transference_engine.sinks import LoggingSink

if TYPE_CHECKING:
    from collections.abc import Iterable

    from transference_core.models.entities import Artifact, Creator, Receiver
    from transference_engine.config import EngineConfig
    from transference_engine.sinks import EventSink

logger = logging.getLogger(__name__)

AFFIRMATION_TAG = "affirmation"


class OfferOrchestrator:
    """Offers artifacts to ranked receivers and applies feedback after each offer."""

    def __init__(self, sink: EventSink | None = None, config: EngineConfig | None = None) -> None:
        self._sink = sink if sink is not None else LoggingSink()
        self._config = config or default_config()

    @property
    def sink(self) -> EventSink:
        return self._sink

    def offer_artifact(
        self,
        creator: Creator,
        artifact: Artifact,
        receivers: Iterable[Receiver],
    ) -> list[OfferEvent]:
        """Offer ``artifact`` to every eligible receiver in rank order.

        Ranking happens once, up front. When the creator's feedback loop is
        enabled, feedback runs after each single offer, so the artifact themes
        and expectation profile drift as the loop walks down the ranking.
        Returns the offer events in emission order.
        """
        candidates = rank_candidates(artifact, creator, receivers, config=self._config)

        offers: list[OfferEvent] = []
        for candidate in candidates:
            event = OfferEvent(
                artifact_id=artifact.id,
                receiver_id=candidate.receiver.id,
                rank=candidate.rank,
                combined_score=candidate.combined_score,
            )
            self._sink.emit(event)
            offers.append(event)

            if creator.feedback_loop_enabled:
                feedback_loop(creator, artifact, AFFIRMATION_TAG, sink=self._sink)

        logger.info(
            "Offered artifact %s to %d receiver(s) for creator %s",
            artifact.id,
            len(offers),
            creator.id,
        )
        return offers


def offer_artifact(
    creator: Creator,
    artifact: Artifact,
    receivers: Iterable[Receiver],
    *,
    sink: EventSink | None = None,
    config: EngineConfig | None = None,
) -> list[OfferEvent]:
    """Rank ``receivers`` for ``artifact`` and offer it to each, in order."""
    return OfferOrchestrator(sink=sink, config=config).offer_artifact(creator, artifact, receivers)
