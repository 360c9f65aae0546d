from __future__ import annotations

import logging

import pytest

from modules.passgen.core.options import (
    GenerationOptions,
    RawOptions,
    validate_and_balance_lengths,
    validate_options,
    validate_type,
)

MIN_TOO_SMALL = (
    "Min length is too small. Should be at least 3 according to number of rules. "
    "Increasing min length to 3"
)


class TestValidateType:
    @pytest.mark.parametrize("value", ["chars", "words"])
    def test_known_types(self, value: str) -> None:
        assert validate_type(value) == []

    @pytest.mark.parametrize("value", ["phrase", "CHARS", "", None])
    def test_unknown_types(self, value) -> None:
        assert validate_type(value) == ["Invalid type value. Should be 'chars' or 'words'"]


class TestBalanceLengths:
    def test_defaults_when_both_absent(self) -> None:
        assert validate_and_balance_lengths(None, None, True, 2) == (8, 16, [], [])

    def test_min_raised_to_rules_count_and_max_defaulted(self) -> None:
        assert validate_and_balance_lengths(1, None, True, 3) == (3, 16, [], [MIN_TOO_SMALL])

    def test_min_raised_with_max_present(self) -> None:
        assert validate_and_balance_lengths(2, 5, True, 3) == (3, 5, [], [MIN_TOO_SMALL])

    def test_min_greater_than_max(self) -> None:
        assert validate_and_balance_lengths(5, 2, True, 0) == (
            5,
            2,
            ["Min length should be less or equal to max length"],
            [],
        )

    def test_max_too_small_for_rules(self) -> None:
        min_length, max_length, errors, warnings = validate_and_balance_lengths(None, 2, True, 3)
        assert (min_length, max_length) == (None, 2)
        assert errors == [
            "Max length is too small. Should be at least 3 according to number of rules"
        ]
        assert warnings == []

    def test_rules_ignored_without_classes(self) -> None:
        assert validate_and_balance_lengths(1, 2, False, 3) == (1, 2, [], [])

    def test_both_non_positive_report_both_errors(self) -> None:
        assert validate_and_balance_lengths(0, -1, True, 0) == (
            0,
            -1,
            ["Min length should be positive", "Max length should be positive"],
            [],
        )

    def test_non_positive_short_circuits_other_checks(self) -> None:
        _, _, errors, warnings = validate_and_balance_lengths(-3, 1, True, 3)
        assert errors == ["Min length should be positive"]
        assert warnings == []

    @pytest.mark.parametrize(
        "max_length, expected",
        [(5, (5, 5)), (8, (8, 8)), (30, (8, 30))],
    )
    def test_min_absent_collapses_below_default(self, max_length, expected) -> None:
        assert validate_and_balance_lengths(None, max_length, False, 0) == (*expected, [], [])

    @pytest.mark.parametrize(
        "min_length, expected",
        [(20, (20, 20)), (16, (16, 16)), (4, (4, 16))],
    )
    def test_max_absent_collapses_above_default(self, min_length, expected) -> None:
        assert validate_and_balance_lengths(min_length, None, False, 0) == (*expected, [], [])


class TestValidateOptions:
    def test_defaults(self) -> None:
        outcome = validate_options({})
        assert outcome.ok
        assert outcome.options == GenerationOptions()
        assert outcome.options.rules_count == 0
        assert outcome.warnings == []

    def test_accepts_raw_options_record(self) -> None:
        outcome = validate_options(
            RawOptions(type="words", min_length=3, max_length=4, uppercase=True, separator=".")
        )
        assert outcome.options == GenerationOptions(
            type="words", min_length=3, max_length=4, uppercase=True, separator="."
        )

    def test_words_do_not_count_rules(self) -> None:
        outcome = validate_options(
            {"type": "words", "max_length": 2, "uppercase": True, "numbers": True, "symbols": True}
        )
        assert outcome.ok
        assert (outcome.options.min_length, outcome.options.max_length) == (2, 2)

    def test_errors_are_accumulated(self) -> None:
        outcome = validate_options({"type": "phrase", "min_length": 0, "max_length": 0})
        assert not outcome.ok
        assert outcome.options is None
        assert outcome.errors == [
            "Invalid type value. Should be 'chars' or 'words'",
            "Min length should be positive",
            "Max length should be positive",
        ]

    def test_warnings_are_logged_and_returned(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="modules.passgen.core.options"):
            outcome = validate_options(
                {"min_length": 1, "uppercase": True, "numbers": True, "symbols": True}
            )
        assert outcome.ok
        assert outcome.options.min_length == 3
        assert outcome.warnings == [MIN_TOO_SMALL]
        assert MIN_TOO_SMALL in caplog.messages

    def test_unknown_keys_ignored_by_raw_record(self) -> None:
        raw = RawOptions.from_mapping({"type": "chars", "verbose": True})
        assert raw == RawOptions(type="chars")

    @pytest.mark.parametrize(
        "raw",
        [
            {},
            {"min_length": 1, "uppercase": True, "numbers": True},
            {"type": "words", "min_length": 20, "separator": " "},
            {"max_length": 3, "symbols": True},
        ],
    )
    def test_idempotent(self, raw, caplog) -> None:
        first = validate_options(raw)
        assert first.ok
        caplog.clear()
        with caplog.at_level(logging.WARNING, logger="modules.passgen.core.options"):
            second = validate_options(first.options.to_raw())
        assert second.options == first.options
        assert second.warnings == []
        assert caplog.records == []
