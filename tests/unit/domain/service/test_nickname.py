"""Unit tests for nickname generation."""

import random

import pytest

from gather.domain.service import NicknameGenerator, generate_nickname
from gather.domain.service.nickname import ADJECTIVES, NOUNS
from gather.domain.value.types import Handle


class TestGenerateNickname:
    """Tests for generate_nickname()."""

    def test_same_seed_same_sequence(self):
        """Generation depends only on the random source."""
        first = [generate_nickname(random.Random(7)) for _ in range(3)]
        second = [generate_nickname(random.Random(7)) for _ in range(3)]

        assert first == second

    def test_adjective_followed_by_noun(self):
        nickname = generate_nickname(random.Random(42))

        adjective = next(a for a in ADJECTIVES if nickname.startswith(a))
        assert nickname[len(adjective):] in NOUNS

    def test_every_combination_is_a_valid_handle(self):
        for adjective in ADJECTIVES:
            for noun in NOUNS:
                Handle(f"{adjective}{noun}")


class TestUniqueHandle:
    """Tests for NicknameGenerator.unique_handle()."""

    @pytest.mark.asyncio
    async def test_returns_first_free_name(self, nickname_generator):
        async def exists(handle: Handle) -> bool:
            return False

        handle = await nickname_generator.unique_handle(exists)

        assert isinstance(handle, Handle)

    @pytest.mark.asyncio
    async def test_skips_taken_names(self, seeded_rng):
        """Should draw again while the generated name is taken."""
        # Arrange
        taken = {generate_nickname(random.Random(1234))}
        generator = NicknameGenerator(seeded_rng, max_attempts=10)
        checked: list[str] = []

        async def exists(handle: Handle) -> bool:
            checked.append(handle.root)
            return handle.root in taken

        # Act
        handle = await generator.unique_handle(exists)

        # Assert
        assert handle.root not in taken
        assert checked[0] in taken

    @pytest.mark.asyncio
    async def test_falls_back_to_numeric_suffix(self):
        """With every generated name taken, a number is appended."""
        generator = NicknameGenerator(random.Random(3), max_attempts=4)
        checks = 0

        async def exists(handle: Handle) -> bool:
            nonlocal checks
            checks += 1
            # Plain names and the first numbered one are taken
            return not handle.root.endswith("2")

        handle = await generator.unique_handle(exists)

        assert handle.root.endswith("2")
        assert handle.root[:-1] in {f"{a}{n}" for a in ADJECTIVES for n in NOUNS}
        assert checks == 4 + 2
