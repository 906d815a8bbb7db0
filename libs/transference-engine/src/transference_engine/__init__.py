"""Transference Engine: artifact-to-receiver matching, ranking and feedback."""

__version__ = "0.1.0"

from transference_engine.affinity import (
    combine_transference,
    shared_meaning,
    social_bond,
    transference_value,
)
from transference_engine.config import EngineConfig, default_config
from transference_engine.exceptions import (
    DimensionMismatchError,
    TransferenceError,
    UnorderableScoreError,
)
from transference_engine.feedback import ADAPTATION_RATE, feedback_loop
from transference_engine.orchestrator import AFFIRMATION_TAG, OfferOrchestrator, offer_artifact
from transference_engine.ranking import (
    is_eligible,
    query_best_receivers,
    rank_candidates,
    score_receiver,
)
from transference_engine.resonance import (
    blend_resonance,
    content_similarity,
    evaluate_resonance,
    sentiment_alignment,
)
from transference_engine.sinks import CollectingSink, EventSink, LoggingSink, NullSink
from transference_engine.vectors import cosine_distance, cosine_similarity, magnitude

__all__ = [
    "ADAPTATION_RATE",
    "AFFIRMATION_TAG",
    "CollectingSink",
    "DimensionMismatchError",
    "EngineConfig",
    "EventSink",
    "LoggingSink",
    "NullSink",
    "OfferOrchestrator",
    "TransferenceError",
    "UnorderableScoreError",
    "blend_resonance",
    "combine_transference",
    "content_similarity",
    "cosine_distance",
    "cosine_similarity",
    "default_config",
    "evaluate_resonance",
    "feedback_loop",
    "is_eligible",
    "magnitude",
    "offer_artifact",
    "query_best_receivers",
    "rank_candidates",
    "score_receiver",
    "sentiment_alignment",
    "shared_meaning",
    "social_bond",
    "transference_value",
]
