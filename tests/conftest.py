"""Shared fixtures for the order_app test suite."""

from typing import Callable, Iterable, List

import pytest


class ScriptedReader:
    """Stands in for input(): returns queued answers and records each prompt."""

    def __init__(self, answers: Iterable[str]):
        self._answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


@pytest.fixture
def scripted_reader() -> Callable[..., ScriptedReader]:
    def _make(*answers: str) -> ScriptedReader:
        return ScriptedReader(answers)

    return _make


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ORDER_APP_* variables from the developer's shell out of the tests."""
    for name in (
        "ORDER_APP_CONFIG",
        "ORDER_APP_ORDER_ID_SEED",
        "ORDER_APP_CURRENCY_SYMBOL",
        "ORDER_APP_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
