"""Event sinks: where offer and evolution events go once the engine emits them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from transference_core.models.events import EvolutionEvent, OfferEvent

if TYPE_CHECKING:
    from transference_core.models.events import EngineEvent

logger = logging.getLogger(__name__)


@runtime_checkable
class EventSink(Protocol):
    """Append-only, fire-and-forget receiver of engine events."""

    def emit(self, event: EngineEvent) -> None: ...


class LoggingSink:
    """Renders each event as a human-readable line on the module logger."""

    def __init__(self, level: int = logging.INFO) -> None:
        self._level = level

    def emit(self, event: EngineEvent) -> None:
        logger.log(self._level, event.render())


class CollectingSink:
    """Keeps every event in memory, in emission order."""

    def __init__(self) -> None:
        self.events: list[EngineEvent] = []

    def emit(self, event: EngineEvent) -> None:
        self.events.append(event)

    @property
    def offers(self) -> list[OfferEvent]:
        return [e for e in self.events if isinstance(e, OfferEvent)]

    @property
    def evolutions(self) -> list[EvolutionEvent]:
        return [e for e in self.events if isinstance(e, EvolutionEvent)]

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)


class NullSink:
    """Discards every event."""

    def emit(self, event: EngineEvent) -> None:
        pass
