from collections.abc import Iterator

import pytest

from lpath import settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(settings.STRICT_ENV_VAR, raising=False)
    monkeypatch.delenv(settings.MAX_INDEX_GAP_ENV_VAR, raising=False)
    settings.reset_settings()
    yield
    settings.reset_settings()


class Person:
    def __init__(self, name: str, tags: list[str] | None = None):
        self.name = name
        self.tags = tags if tags is not None else []
        self.calls = 0

    def greet(self, greeting: str = "hello", punctuation: str = "!") -> str:
        self.calls += 1
        return f"{greeting} {self.name}{punctuation}"

    def profile(self) -> dict:
        return {"display": self.name.title(), "tags": self.tags}

    def nothing(self):
        return None


@pytest.fixture
def person() -> Person:
    return Person("ada lovelace", tags=["math", "engines"])
