from __future__ import annotations

from typing import List, Sequence

import pytest

from universe.settings import get_settings

SETTINGS_ENV = (
    "PASSGEN_MAX_ATTEMPTS",
    "PASSGEN_DICTIONARY_PATH",
    "PASSGEN_LOG_LEVEL",
    "PASSGEN_LOG_JSON",
)


class ScriptedRandom:
    """Replays fixed ``randint`` results and ``choice`` indices."""

    def __init__(self, ints: Sequence[int] = (), picks: Sequence[int] = ()) -> None:
        self.ints: List[int] = list(ints)
        self.picks: List[int] = list(picks)

    def randint(self, a: int, b: int) -> int:
        value = self.ints.pop(0)
        assert a <= value <= b
        return value

    def choice(self, seq):
        return seq[self.picks.pop(0)]


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
