"""Tests for frozen value objects."""

import math

import pytest
from pydantic import ValidationError

from transference_core.models.entities import Receiver
from transference_core.models.identifiers import ReceiverId
from transference_core.models.values import RankedCandidate, ScoreBreakdown


def _breakdown(**overrides: float) -> ScoreBreakdown:
    fields = {
        "content_similarity": 1.0,
        "sentiment_alignment": 1.0,
        "resonance": 1.0,
        "social_bond": 0.6,
        "shared_meaning": 1.0,
        "transference": 0.6,
        "combined": 1.6,
    }
    fields.update(overrides)
    return ScoreBreakdown(**fields)


class TestScoreBreakdown:
    def test_valid(self) -> None:
        b = _breakdown()
        assert b.combined == 1.6
        assert b.social_bond == 0.6

    def test_bond_above_one_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _breakdown(social_bond=1.2)

    def test_negative_meaning_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _breakdown(shared_meaning=-1.0)

    def test_alignment_bounds(self) -> None:
        with pytest.raises(ValidationError):
            _breakdown(sentiment_alignment=1.5)

    def test_negative_content_similarity_allowed(self) -> None:
        b = _breakdown(content_similarity=-1.0)
        assert b.content_similarity == -1.0

    def test_nan_combined_allowed(self) -> None:
        b = _breakdown(combined=float("nan"))
        assert math.isnan(b.combined)

    def test_frozen(self) -> None:
        b = _breakdown()
        with pytest.raises(ValidationError):
            b.combined = 3.0  # type: ignore[misc]


class TestRankedCandidate:
    def test_holds_receiver_by_reference(self) -> None:
        receiver = Receiver(id=ReceiverId("r-1"), reputation_score=0.9)
        candidate = RankedCandidate(rank=1, receiver=receiver, breakdown=_breakdown())
        assert candidate.receiver is receiver

    def test_combined_score(self) -> None:
        receiver = Receiver(id=ReceiverId("r-1"))
        candidate = RankedCandidate(rank=2, receiver=receiver, breakdown=_breakdown(combined=0.4))
        assert candidate.combined_score == 0.4

    def test_rank_is_one_based(self) -> None:
        with pytest.raises(ValidationError):
            RankedCandidate(rank=0, receiver=Receiver(id=ReceiverId("r-1")), breakdown=_breakdown())
