"""Test configuration and fixtures."""

import os
import random

import logfire
import pytest

from gather.domain.service import NicknameGenerator

os.environ.setdefault("ENVIRONMENT", "test")

# Spans and logs stay local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def seeded_rng() -> random.Random:
    """Random source with a fixed sequence."""
    return random.Random(1234)


@pytest.fixture
def nickname_generator(seeded_rng) -> NicknameGenerator:
    """Nickname generator over a seeded random source."""
    return NicknameGenerator(seeded_rng, max_attempts=10)
