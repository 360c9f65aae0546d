from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

Range = Tuple[int, int]


class CharacterClass(str, Enum):
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    NUMERIC = "numeric"
    SYMBOL = "symbol"


CLASS_RANGES: Dict[CharacterClass, Tuple[Range, ...]] = {
    CharacterClass.LOWERCASE: ((0x61, 0x7A),),
    CharacterClass.UPPERCASE: ((0x41, 0x5A),),
    CharacterClass.NUMERIC: ((0x30, 0x39),),
    CharacterClass.SYMBOL: (
        (0x21, 0x2F),
        (0x3A, 0x40),
        (0x5B, 0x60),
        (0x7B, 0x7E),
    ),
}


@dataclass(frozen=True)
class GeneratorDefaults:
    """Read-only constants shared by the validator and the generators."""

    types: Tuple[str, ...] = ("chars", "words")
    type: str = "chars"
    min_length: int = 8
    max_length: int = 16
    separator: str = "-"
    ranges: Mapping[CharacterClass, Tuple[Range, ...]] = field(
        default_factory=lambda: MappingProxyType(dict(CLASS_RANGES))
    )


DEFAULTS = GeneratorDefaults()


def _in_ranges(code: int, ranges: Tuple[Range, ...]) -> bool:
    return any(start <= code <= end for start, end in ranges)


def codepoints(char_class: CharacterClass) -> List[int]:
    values: List[int] = []
    for start, end in DEFAULTS.ranges[char_class]:
        values.extend(range(start, end + 1))
    return values


def is_lower(code: int) -> bool:
    return _in_ranges(code, DEFAULTS.ranges[CharacterClass.LOWERCASE])


def is_upper(code: int) -> bool:
    return _in_ranges(code, DEFAULTS.ranges[CharacterClass.UPPERCASE])


def is_numeric(code: int) -> bool:
    return _in_ranges(code, DEFAULTS.ranges[CharacterClass.NUMERIC])


def is_special(code: int) -> bool:
    return _in_ranges(code, DEFAULTS.ranges[CharacterClass.SYMBOL])
