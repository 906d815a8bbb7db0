"""Shared fixtures for engine tests: the reference two-receiver scenario."""

import pytest

from transference_core.models.entities import Artifact, Creator, Receiver
from transference_core.models.identifiers import ArtifactId, CreatorId, ReceiverId
from transference_engine.config import EngineConfig
from transference_engine.sinks import CollectingSink


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig()


@pytest.fixture
def sink() -> CollectingSink:
    return CollectingSink()


@pytest.fixture
def artifact() -> Artifact:
    return Artifact(id=ArtifactId("A"), quality_score=0.7, vector=[1.0, 0.0], themes=["joy"])


@pytest.fixture
def creator() -> Creator:
    return Creator(id=CreatorId("C"), expectation_profile=[1.0, 0.5, 0.2])


@pytest.fixture
def r1() -> Receiver:
    return Receiver(
        id=ReceiverId("R1"),
        value_vector=[1.0, 0.0],
        sentiment_profile=["joy"],
        reputation_score=0.9,
    )


@pytest.fixture
def r2() -> Receiver:
    return Receiver(
        id=ReceiverId("R2"),
        value_vector=[1.0, 0.0],
        sentiment_profile=["joy"],
        reputation_score=0.3,
    )


@pytest.fixture
def bonded_r1(creator: Creator) -> Receiver:
    """R1 after engaging the creator three times."""
    return Receiver(
        id=ReceiverId("R1"),
        value_vector=[1.0, 0.0],
        sentiment_profile=["joy"],
        reputation_score=0.9,
        interaction_history=[creator.id, CreatorId("other"), creator.id, creator.id],
    )


@pytest.fixture
def creator_with_history() -> Creator:
    return Creator(
        id=CreatorId("C"),
        expectation_profile=[1.0, 0.5, 0.2],
        artifact_history=[Artifact(id=ArtifactId("A0"), vector=[0.5, 0.5], themes=["joy"])],
    )
