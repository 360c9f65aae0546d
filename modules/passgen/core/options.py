from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Mapping, Tuple

from modules.passgen.core.charsets import DEFAULTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawOptions:
    """Options as the parser produced them; ``None`` means the flag was absent."""

    type: str | None = None
    min_length: int | None = None
    max_length: int | None = None
    uppercase: bool | None = None
    numbers: bool | None = None
    symbols: bool | None = None
    separator: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawOptions":
        known = {item.name for item in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


@dataclass(frozen=True)
class GenerationOptions:
    type: str = DEFAULTS.type
    min_length: int = DEFAULTS.min_length
    max_length: int = DEFAULTS.max_length
    uppercase: bool = False
    numbers: bool = False
    symbols: bool = False
    separator: str = DEFAULTS.separator

    @property
    def chars(self) -> bool:
        return self.type == "chars"

    @property
    def rules_count(self) -> int:
        return rules_count(self.uppercase, self.numbers, self.symbols)

    def to_raw(self) -> RawOptions:
        return RawOptions(**asdict(self))


@dataclass(frozen=True)
class ValidationOutcome:
    options: GenerationOptions | None = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors and self.options is not None


def rules_count(uppercase: bool, numbers: bool, symbols: bool) -> int:
    return int(bool(uppercase)) + int(bool(numbers)) + int(bool(symbols))


def validate_type(value: Any) -> List[str]:
    if value not in DEFAULTS.types:
        return ["Invalid type value. Should be 'chars' or 'words'"]
    return []


def validate_and_balance_lengths(
    min_length: int | None,
    max_length: int | None,
    requires_classes: bool,
    rules: int,
) -> Tuple[int | None, int | None, List[str], List[str]]:
    """Check the length bounds and fill in defaults.

    Returns ``(min_length, max_length, errors, warnings)``. When errors are
    present the bounds come back untouched. A minimum below the number of
    required classes is raised with a warning rather than rejected; the
    maximum is never raised.
    """
    errors: List[str] = []
    warnings: List[str] = []

    if min_length is not None and min_length <= 0:
        errors.append("Min length should be positive")
    if max_length is not None and max_length <= 0:
        errors.append("Max length should be positive")
    if errors:
        return min_length, max_length, errors, warnings

    if min_length is not None and max_length is not None and min_length > max_length:
        errors.append("Min length should be less or equal to max length")
        return min_length, max_length, errors, warnings

    if max_length is not None and requires_classes and max_length < rules:
        errors.append(
            f"Max length is too small. Should be at least {rules} according to number of rules"
        )
        return min_length, max_length, errors, warnings

    if min_length is not None and requires_classes and min_length < rules:
        warnings.append(
            f"Min length is too small. Should be at least {rules} according to number of rules. "
            f"Increasing min length to {rules}"
        )
        min_length = rules

    if min_length is None and max_length is None:
        return DEFAULTS.min_length, DEFAULTS.max_length, errors, warnings
    if min_length is None:
        assert max_length is not None
        if max_length < DEFAULTS.min_length:
            return max_length, max_length, errors, warnings
        return DEFAULTS.min_length, max_length, errors, warnings
    if max_length is None:
        if min_length > DEFAULTS.max_length:
            return min_length, min_length, errors, warnings
        return min_length, DEFAULTS.max_length, errors, warnings

    return min_length, max_length, errors, warnings


def _raw_dict(raw: RawOptions | Mapping[str, Any] | None) -> Dict[str, Any]:
    if raw is None:
        return {}
    if isinstance(raw, RawOptions):
        data = asdict(raw)
    else:
        data = dict(raw)
    return {key: value for key, value in data.items() if value is not None}


def validate_options(raw: RawOptions | Mapping[str, Any] | None) -> ValidationOutcome:
    """Validate and normalize raw options.

    All errors are collected before returning so callers can report them
    together. Warnings are logged here and also returned on the outcome.
    """
    data = _raw_dict(raw)

    type_value = data.get("type", DEFAULTS.type)
    errors = validate_type(type_value)
    chars = type_value == "chars"

    uppercase = bool(data.get("uppercase", False))
    numbers = bool(data.get("numbers", False))
    symbols = bool(data.get("symbols", False))
    rules = rules_count(uppercase, numbers, symbols)

    min_length, max_length, length_errors, warnings = validate_and_balance_lengths(
        data.get("min_length"),
        data.get("max_length"),
        chars,
        rules,
    )
    errors.extend(length_errors)

    for warning in warnings:
        logger.warning(warning)

    separator = data.get("separator", DEFAULTS.separator)

    if errors:
        logger.error("Validation errors: %s", errors)
        return ValidationOutcome(errors=errors, warnings=warnings)

    assert min_length is not None and max_length is not None
    options = GenerationOptions(
        type=type_value,
        min_length=min_length,
        max_length=max_length,
        uppercase=uppercase,
        numbers=numbers,
        symbols=symbols,
        separator=str(separator),
    )
    return ValidationOutcome(options=options, warnings=warnings)
