"""Pytest configuration and fixtures."""

import random
from typing import AsyncGenerator, Iterable

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from mazecarver.main import app


class ZeroRandom:
    """Random source that always picks the first option."""

    def randrange(self, stop: int) -> int:
        return 0


class ScriptedRandom:
    """Random source replaying a fixed list of choices, then falling back to 0."""

    def __init__(self, choices: Iterable[int]):
        self.choices = list(choices)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        value = self.choices.pop(0) if self.choices else 0
        assert 0 <= value < stop, f"scripted choice {value} out of range [0, {stop})"
        return value


@pytest.fixture
def zero_rng() -> ZeroRandom:
    """Random source always returning 0."""
    return ZeroRandom()


@pytest.fixture
def scripted_rng() -> type[ScriptedRandom]:
    """Factory for random sources replaying fixed choices."""
    return ScriptedRandom


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic standard random source."""
    return random.Random(1234)


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
