"""Strongly typed identifiers for Gather domain entities."""

from typing import NewType

# Provider-issued (Kakao id, Google sub) or locally assigned (UUID4) user id
StableId = NewType("StableId", str)
