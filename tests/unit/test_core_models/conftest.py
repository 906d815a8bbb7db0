"""Shared fixtures for domain model tests."""

from datetime import UTC, datetime

import pytest

from transference_core.models.identifiers import ArtifactId, CreatorId, ReceiverId


@pytest.fixture
def now() -> datetime:
    return datetime.now(UTC)


@pytest.fixture
def artifact_id() -> ArtifactId:
    return ArtifactId("artifact-7f3a")


@pytest.fixture
def creator_id() -> CreatorId:
    return CreatorId("creator-ines")


@pytest.fixture
def receiver_id() -> ReceiverId:
    return ReceiverId("receiver-b2")
