from __future__ import annotations

from typing import Iterable, List

GENERIC_FAILURE = "Unable to generate password"


class PassgenError(Exception):
    """Generation failure normalized by the CLI and the web error handler."""

    status_code = 400
    code = "passgen_error"

    def __init__(self, errors: Iterable[str] | str, *, detail: str | None = None) -> None:
        if isinstance(errors, str):
            errors = [errors]
        self.errors: List[str] = [str(item) for item in errors]
        self.detail = detail or "; ".join(self.errors) or GENERIC_FAILURE
        super().__init__(self.detail)


class ParseError(PassgenError):
    code = "parse_error"


class OptionsValidationError(PassgenError):
    code = "validation_error"


class AttemptsExhaustedError(PassgenError):
    status_code = 422
    code = "attempts_exhausted"


class DictionaryError(PassgenError):
    status_code = 500
    code = "dictionary_error"


__all__ = [
    "GENERIC_FAILURE",
    "AttemptsExhaustedError",
    "DictionaryError",
    "OptionsValidationError",
    "ParseError",
    "PassgenError",
]
