"""Tests for domain enumerations."""

import pytest

from transference_core.models.enums import DimensionPolicy, EventKind, NanPolicy


class TestDimensionPolicy:
    def test_values(self) -> None:
        assert set(DimensionPolicy) == {DimensionPolicy.STRICT, DimensionPolicy.TRUNCATE}

    def test_string_value(self) -> None:
        assert DimensionPolicy.STRICT == "STRICT"
        assert str(DimensionPolicy.TRUNCATE) == "TRUNCATE"

    def test_from_string(self) -> None:
        assert DimensionPolicy("TRUNCATE") is DimensionPolicy.TRUNCATE

    def test_invalid_value(self) -> None:
        with pytest.raises(ValueError):
            DimensionPolicy("PAD")


class TestNanPolicy:
    def test_values(self) -> None:
        assert set(NanPolicy) == {NanPolicy.LAST, NanPolicy.REJECT}

    def test_from_string(self) -> None:
        assert NanPolicy("REJECT") is NanPolicy.REJECT

    def test_invalid_value(self) -> None:
        with pytest.raises(ValueError):
            NanPolicy("FIRST")


class TestEventKind:
    def test_values(self) -> None:
        assert set(EventKind) == {EventKind.OFFER, EventKind.EVOLUTION}

    def test_string_value(self) -> None:
        assert EventKind.OFFER == "OFFER"
