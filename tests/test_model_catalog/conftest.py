from __future__ import annotations

import copy
from typing import Any

import pytest

from model_catalog.store import DataStore

UPSTREAM_CATALOG: dict[str, Any] = {
    "anthropic": {
        "id": "anthropic",
        "name": "Anthropic",
        "npm": "@ai-sdk/anthropic",
        "models": {
            "claude-opus-4-1": {
                "id": "claude-opus-4-1",
                "name": "Claude Opus 4.1",
                "family": "claude-opus",
                "release_date": "2025-08-05",
                "attachment": True,
                "reasoning": True,
                "tool_call": True,
                "cost": {"input": 15, "output": 75, "cache_read": 1.5, "cache_write": 18.75},
                "limit": {"context": 200000, "output": 32000},
                "modalities": {"input": ["text", "image"], "output": ["text"]},
            },
            "claude-3-5-haiku-latest": {
                "id": "claude-3-5-haiku-latest",
                "name": "Claude Haiku 3.5 (latest)",
                "family": "claude-haiku",
                "release_date": "2024-10-22",
                "tool_call": True,
                "cost": {"input": 0.8, "output": 4},
                "limit": {"context": 200000, "output": 8192},
            },
            "claude-3-5-haiku-20241022": {
                "id": "claude-3-5-haiku-20241022",
                "name": "Claude Haiku 3.5",
                "family": "claude-haiku",
                "release_date": "2024-10-22",
                "tool_call": True,
            },
            "claude-3-haiku-20240307": {
                "id": "claude-3-haiku-20240307",
                "name": "Claude Haiku 3",
                "family": "claude-haiku",
                "release_date": "2024-03-07",
            },
        },
    },
    "empty": {"id": "empty", "name": "Empty", "models": {}},
    "openai": {
        "id": "openai",
        "name": "OpenAI",
        "models": {
            "gpt-4o-mini": {
                "id": "gpt-4o-mini",
                "name": "GPT-4o mini",
                "family": "gpt-4o",
                "release_date": "2024-07-18",
                "modalities": {"input": ["text", "image"]},
                "tool_call": True,
            },
            "o3": {
                "id": "o3",
                "name": "o3",
                "release_date": "2025-04-16",
                "reasoning": True,
            },
        },
    },
}


class StubClient:
    """Stands in for HttpClient: returns a fixed payload or raises."""

    def __init__(self, payload: Any = None, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.requested: list[str] = []

    def get_json(self, url: str) -> Any:
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        return self.payload

    def close(self) -> None:
        pass

    def __enter__(self) -> StubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@pytest.fixture
def catalog() -> dict[str, Any]:
    return copy.deepcopy(UPSTREAM_CATALOG)


@pytest.fixture
def stub_client() -> type[StubClient]:
    return StubClient


@pytest.fixture
def client(catalog) -> StubClient:
    return StubClient(payload=catalog)


@pytest.fixture
def store(tmp_path) -> DataStore:
    return DataStore(tmp_path)
