from __future__ import annotations

import logging
from typing import Callable, TypeVar

from modules.passgen.core.errors import AttemptsExhaustedError

T = TypeVar("T")

logger = logging.getLogger(__name__)


def produce_checked(
    producer: Callable[[], T],
    checker: Callable[[T], bool],
    *,
    max_attempts: int | None = None,
) -> T:
    """Call ``producer`` until ``checker`` accepts a candidate and return it.

    There is no retry limit unless ``max_attempts`` is given. Some option
    combinations (upper-cased passphrases in particular) can reject almost
    every candidate, so callers that need bounded latency should pass a cap.
    """
    if max_attempts is not None and max_attempts <= 0:
        raise ValueError("max_attempts must be positive.")

    attempts = 0
    while True:
        candidate = producer()
        attempts += 1
        if checker(candidate):
            if attempts > 1:
                logger.debug("Accepted candidate after %d attempts.", attempts)
            return candidate
        if max_attempts is not None and attempts >= max_attempts:
            raise AttemptsExhaustedError(
                f"No candidate satisfied the rules after {attempts} attempts."
            )
