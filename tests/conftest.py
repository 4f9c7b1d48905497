"""Shared fixtures: a recording stand-in for the Linkup client."""

import pytest
from pydantic import BaseModel

from core.handler import InvocationHandler


class Source(BaseModel):
    name: str
    url: str
    snippet: str


class SourcedAnswer(BaseModel):
    """Same shape as linkup's LinkupSourcedAnswer."""

    answer: str
    sources: list[Source]


def make_answer() -> SourcedAnswer:
    return SourcedAnswer(
        answer="Paris is the capital of France.",
        sources=[
            Source(
                name="Wikipedia",
                url="https://en.wikipedia.org/wiki/Paris",
                snippet="Paris is the capital and largest city of France.",
            )
        ],
    )


class FakeSearchClient:
    """Records every async_search call and replays a canned result or error."""

    def __init__(self, result=None, error: Exception | None = None):
        self.result = make_answer() if result is None else result
        self.error = error
        self.calls: list[dict] = []

    async def async_search(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_client() -> FakeSearchClient:
    return FakeSearchClient()


@pytest.fixture
def handler(fake_client) -> InvocationHandler:
    return InvocationHandler(fake_client)


@pytest.fixture
def make_client():
    """Factory for clients with a custom result or error."""
    return FakeSearchClient
