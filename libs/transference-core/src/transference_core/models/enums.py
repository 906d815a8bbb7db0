"""Domain enumerations for the matching engine."""

from enum import StrEnum


class DimensionPolicy(StrEnum):
    """How cosine distance treats vectors of unequal length."""

    STRICT = "STRICT"
    TRUNCATE = "TRUNCATE"


class NanPolicy(StrEnum):
    """How the ranking engine orders a combined score that is not a number."""

    LAST = "LAST"
    REJECT = "REJECT"


class EventKind(StrEnum):
    """Discriminator carried by every event emitted to a sink."""

    OFFER = "OFFER"
    EVOLUTION = "EVOLUTION"
