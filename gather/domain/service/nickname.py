"""Generated nicknames for users whose provider supplies no name."""

import random
from typing import Awaitable, Callable

import logfire

from gather.domain.value.types import Handle

from .base import Service

ADJECTIVES = (
    "Cool",
    "Brave",
    "Swift",
    "Wise",
    "Quiet",
    "Cheerful",
    "Cute",
    "Mysterious",
    "Funny",
    "Fresh",
    "Lively",
    "Warm",
    "Sparkling",
)

NOUNS = (
    "Lion",
    "Tiger",
    "Deer",
    "Eagle",
    "Sloth",
    "Cat",
    "Rabbit",
    "Puppy",
    "Owl",
    "Raccoon",
    "Hamster",
    "Squirrel",
    "Penguin",
    "Hedgehog",
)


def generate_nickname(rng: random.Random) -> str:
    """Pick one adjective and one noun, e.g. ``CoolLion``.

    Args:
        rng: Random source; a seeded ``random.Random`` gives a fixed sequence

    Returns:
        Generated nickname, always a valid handle
    """
    return f"{rng.choice(ADJECTIVES)}{rng.choice(NOUNS)}"


class NicknameGenerator(Service):
    """Draws nicknames from an injected random source."""

    def __init__(self, rng: random.Random, max_attempts: int = 10) -> None:
        """Initialize generator.

        Args:
            rng: Random source
            max_attempts: Generated names tried before appending a number
        """
        self.rng = rng
        self.max_attempts = max_attempts

    def generate(self) -> str:
        """Generate a nickname."""
        return generate_nickname(self.rng)

    async def unique_handle(
        self, exists: Callable[[Handle], Awaitable[bool]]
    ) -> Handle:
        """Generate a handle no current user holds.

        Tries up to ``max_attempts`` generated names, then appends an
        increasing number to the last one until it is free. The store's
        unique constraint still decides at insert time.

        Args:
            exists: Async check returning True when a handle is taken

        Returns:
            A handle that was free when checked
        """
        candidate = Handle(self.generate())
        for attempt in range(self.max_attempts):
            if attempt:
                candidate = Handle(self.generate())
            if not await exists(candidate):
                return candidate

        base = candidate.root
        suffix = 1
        while True:
            numbered = Handle(f"{base}{suffix}")
            if not await exists(numbered):
                logfire.info(
                    "Generated handle needed numeric suffix",
                    handle=numbered.root,
                    attempts=self.max_attempts + suffix,
                )
                return numbered
            suffix += 1
