from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Sequence, Tuple

from modules.passgen.core.charsets import (
    CharacterClass,
    codepoints,
    is_numeric,
    is_special,
    is_upper,
)
from modules.passgen.core.errors import (
    DictionaryError,
    OptionsValidationError,
    ParseError,
)
from modules.passgen.core.options import GenerationOptions, RawOptions, validate_options
from modules.passgen.core.rng import RandomSource, make_rng
from modules.passgen.core.sampling import produce_checked
from modules.passgen.core.words import get_dictionary

logger = logging.getLogger(__name__)

Check = Callable[[int], bool]


def _build_alphabet(options: GenerationOptions) -> Tuple[List[int], List[Check]]:
    alphabet = codepoints(CharacterClass.LOWERCASE)
    checks: List[Check] = []
    if options.uppercase:
        alphabet += codepoints(CharacterClass.UPPERCASE)
        checks.append(is_upper)
    if options.numbers:
        alphabet += codepoints(CharacterClass.NUMERIC)
        checks.append(is_numeric)
    if options.symbols:
        alphabet += codepoints(CharacterClass.SYMBOL)
        checks.append(is_special)
    return alphabet, checks


def satisfies_all(candidate: Sequence[Any], checks: Iterable[Callable[[Any], bool]]) -> bool:
    return all(any(check(item) for item in candidate) for check in checks)


def generate_chars(
    options: GenerationOptions,
    *,
    rng: RandomSource | None = None,
    max_attempts: int | None = None,
) -> str:
    if rng is None:
        rng = make_rng()
    password_length = rng.randint(options.min_length, options.max_length)
    alphabet, checks = _build_alphabet(options)

    def producer() -> List[int]:
        return [rng.choice(alphabet) for _ in range(password_length)]

    def checker(candidate: List[int]) -> bool:
        return satisfies_all(candidate, checks)

    accepted = produce_checked(producer, checker, max_attempts=max_attempts)
    return "".join(chr(code) for code in accepted)


def random_upper_transform(word: str, rng: RandomSource) -> str:
    # Each character is flipped on its own coin, not the whole word.
    return "".join(char.upper() if rng.randint(0, 1) == 1 else char for char in word)


def generate_words(
    options: GenerationOptions,
    dictionary: Sequence[str] | None = None,
    *,
    rng: RandomSource | None = None,
    max_attempts: int | None = None,
) -> str:
    if rng is None:
        rng = make_rng()
    words = list(dictionary) if dictionary is not None else get_dictionary()
    if not words:
        raise DictionaryError("Dictionary is empty.")

    word_count = rng.randint(options.min_length, options.max_length)

    if options.uppercase:
        def transform(word: str) -> str:
            return random_upper_transform(word, rng)
    else:
        def transform(word: str) -> str:
            return word

    def producer() -> str:
        picked = [rng.choice(words) for _ in range(word_count)]
        return options.separator.join(transform(word) for word in picked)

    def checker(candidate: str) -> bool:
        if options.uppercase:
            return candidate.upper() == candidate
        return True

    return produce_checked(producer, checker, max_attempts=max_attempts)


def generate(
    options: GenerationOptions,
    *,
    dictionary: Sequence[str] | None = None,
    rng: RandomSource | None = None,
    max_attempts: int | None = None,
) -> str:
    if options.type == "chars":
        return generate_chars(options, rng=rng, max_attempts=max_attempts)
    return generate_words(options, dictionary, rng=rng, max_attempts=max_attempts)


def generate_password(
    raw: RawOptions | Mapping[str, Any] | None,
    *,
    parse_errors: Iterable[str] = (),
    dictionary: Sequence[str] | None = None,
    rng: RandomSource | None = None,
    max_attempts: int | None = None,
) -> Dict[str, Any]:
    """Validate raw options and produce one password or passphrase.

    Raises ``ParseError`` when the parser already reported problems,
    ``OptionsValidationError`` when validation fails, and lets generation
    errors (``AttemptsExhaustedError``, ``DictionaryError``) propagate.
    """
    parse_errors = list(parse_errors)
    if parse_errors:
        logger.error("Parsing errors: %s", parse_errors)
        raise ParseError(parse_errors)

    outcome = validate_options(raw)
    if not outcome.ok or outcome.options is None:
        raise OptionsValidationError(outcome.errors)

    options = outcome.options
    value = generate(options, dictionary=dictionary, rng=rng, max_attempts=max_attempts)
    return {
        "type": options.type,
        "min_length": options.min_length,
        "max_length": options.max_length,
        "value": value,
        "warnings": list(outcome.warnings),
    }
