"""Typed identifiers: NewType wrappers over str to prevent stringly-typed bugs."""

from typing import NewType

ArtifactId = NewType("ArtifactId", str)
CreatorId = NewType("CreatorId", str)
ReceiverId = NewType("ReceiverId", str)
