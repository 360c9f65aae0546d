from __future__ import annotations

import random
from typing import Any, Protocol, Sequence, Tuple, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """The slice of ``random.Random`` the generators draw from."""

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...


def parse_seed(value: Any, *, label: str = "Seed") -> Tuple[int | None, str | None]:
    """Read an optional seed from a form field or flag; blank means unseeded."""
    if value is None or isinstance(value, bool):
        return None, None
    if isinstance(value, int):
        return value, None
    raw = str(value).strip()
    if not raw:
        return None, None
    try:
        return int(raw, 10), None
    except ValueError:
        return None, f"{label} must be a whole number."


def make_rng(seed: int | None = None) -> RandomSource:
    # Seeded sources are reproducible; unseeded ones come from the OS.
    if seed is not None:
        return random.Random(seed)
    return random.SystemRandom()
