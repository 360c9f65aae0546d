#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import List, NoReturn, Sequence

from pydantic import ValidationError

from modules.passgen.core.errors import GENERIC_FAILURE, ParseError, PassgenError
from modules.passgen.core.generate import generate_password
from modules.passgen.core.options import RawOptions
from modules.passgen.core.rng import make_rng, parse_seed
from modules.passgen.core.words import load_dictionary
from universe.logger import setup_logger
from universe.settings import get_settings

OPTION_FIELDS = ("type", "min_length", "max_length", "uppercase", "numbers", "symbols", "separator")


class OptionParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad values instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise ParseError(message)


@dataclass
class ParsedArgs:
    options: RawOptions = field(default_factory=RawOptions)
    seed: int | None = None
    max_attempts: int | None = None
    dictionary: str | None = None
    unknown: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


def build_parser() -> OptionParser:
    parser = OptionParser(
        prog="passgen",
        description="Generate a random password or passphrase.",
        allow_abbrev=False,
    )
    parser.add_argument("--type", help="chars (default) or words")
    parser.add_argument("--min-length", dest="min_length", type=int)
    parser.add_argument("--max-length", dest="max_length", type=int)
    parser.add_argument("--uppercase", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--numbers", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--symbols", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--separator", help="word separator for --type words")
    parser.add_argument("--seed", help="seed for reproducible output")
    parser.add_argument(
        "--max-attempts",
        dest="max_attempts",
        type=int,
        help="give up after this many rejected candidates",
    )
    parser.add_argument("--dictionary", help="word list file, one word per line")
    return parser


def parse_args(argv: Sequence[str]) -> ParsedArgs:
    parser = build_parser()
    try:
        namespace, unknown = parser.parse_known_args(list(argv))
    except ParseError as exc:
        return ParsedArgs(errors=exc.errors)

    parsed = ParsedArgs(
        options=RawOptions(**{name: getattr(namespace, name) for name in OPTION_FIELDS}),
        dictionary=namespace.dictionary,
        unknown=list(unknown),
    )

    seed, error = parse_seed(namespace.seed)
    if error:
        parsed.errors.append(error)
    parsed.seed = seed

    if namespace.max_attempts is not None and namespace.max_attempts <= 0:
        parsed.errors.append("Max attempts must be positive.")
    else:
        parsed.max_attempts = namespace.max_attempts

    return parsed


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as exc:
        log = setup_logger()
        log.error("invalid_settings", errors=[error["msg"] for error in exc.errors()])
        print(GENERIC_FAILURE)
        return 1
    log = setup_logger(settings.log_level, json_logs=settings.log_json)

    parsed = parse_args(sys.argv[1:] if argv is None else argv)
    if parsed.unknown:
        log.warning("unknown_options", options=parsed.unknown)

    max_attempts = parsed.max_attempts
    if max_attempts is None:
        max_attempts = settings.max_attempts

    try:
        dictionary = None
        if parsed.dictionary and not parsed.errors:
            dictionary = load_dictionary(parsed.dictionary)
        result = generate_password(
            parsed.options,
            parse_errors=parsed.errors,
            dictionary=dictionary,
            rng=make_rng(parsed.seed),
            max_attempts=max_attempts,
        )
    except PassgenError as exc:
        log.error("generation_failed", code=exc.code, errors=exc.errors)
        print(GENERIC_FAILURE)
        return 1

    print(result["value"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
