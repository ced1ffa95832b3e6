from __future__ import annotations

import string
from collections.abc import Sequence

from .exceptions import (
    CheckDigitFormatError,
    FieldFormatError,
    FixedFieldBoundaryError,
    InsufficientTokensError,
)
from .models import ParsedRecord

MIN_TOKENS = 4
GIVEN_NAMES_START = 3
DOCUMENT_NUMBER_LENGTH = 9
FIXED_FIELD_BLOCK_LENGTH = 44

# Offsets into the assembled fixed-field block.
_DOCUMENT_NUMBER = slice(0, 9)
_DOCUMENT_NUMBER_CHECK = 9
_ISSUING_STATE = slice(10, 13)
_BIRTH_DATE = slice(13, 19)
_BIRTH_DATE_CHECK = 19
_SEX = 20
_EXPIRY_DATE = slice(21, 27)
_EXPIRY_DATE_CHECK = 27
_MIN_BLOCK_LENGTH = 28

_DIGITS = frozenset(string.digits)
_ALNUM = frozenset(string.ascii_letters + string.digits)


def _is_digits(token: str) -> bool:
    # Vacuously true for an empty token, so a run of fillers ends the given names.
    return all(ch in _DIGITS for ch in token)


def _opens_fixed_fields(token: str) -> bool:
    prefix = token[:DOCUMENT_NUMBER_LENGTH]
    if len(prefix) != DOCUMENT_NUMBER_LENGTH:
        return False
    return all(ch in _ALNUM for ch in prefix) and any(ch in _DIGITS for ch in prefix)


def find_fixed_field_start(tokens: Sequence[str]) -> int | None:
    """Index of the first token carrying a document number prefix, or None.

    A document number is nine alphanumeric characters with at least one
    digit; an all-digit prefix is the common case. Name tokens normally
    contain no digits. One that does (an OCR slip such as ``ANNA1MARIAX``)
    is taken as the block start, and parsing then fails on its check
    digit rather than reaching the real document number further on.
    """
    for index, token in enumerate(tokens):
        if _opens_fixed_fields(token):
            return index
    return None


def extract_given_names(tokens: Sequence[str], stop: int | None = None) -> tuple[str, ...]:
    names: list[str] = []
    for token in tokens[GIVEN_NAMES_START:stop]:
        if _is_digits(token):
            break
        names.append(token)
    return tuple(names)


def assemble_fixed_fields(tokens: Sequence[str], start: int) -> str:
    block = ""
    for token in tokens[start:]:
        if len(block) >= FIXED_FIELD_BLOCK_LENGTH:
            break
        block += token
    return block


def _check_digit_at(block: str, index: int, field: str) -> int:
    char = block[index : index + 1]
    if not char or char not in _DIGITS:
        raise CheckDigitFormatError(f"Invalid {field} check digit: {char!r}", field=field)
    return int(char)


def _date_at(block: str, span: slice, field: str) -> str:
    value = block[span]
    if len(value) != 6 or not _is_digits(value):
        raise FieldFormatError(f"Invalid {field}: {value!r}", field=field)
    return value


def _composite_check_digit(last_token: str) -> int:
    for char in reversed(last_token):
        if char in _DIGITS:
            return int(char)
    raise CheckDigitFormatError("Invalid composite check digit: none found in final token", field="composite")


def parse_tokens(tokens: Sequence[str]) -> ParsedRecord:
    if len(tokens) < MIN_TOKENS:
        raise InsufficientTokensError(f"Expected at least {MIN_TOKENS} tokens, got {len(tokens)}")

    if not tokens[0]:
        raise FieldFormatError("Invalid document type: empty", field="document_type")
    if len(tokens[1]) < 3:
        raise FieldFormatError(f"Invalid country code: {tokens[1]!r}", field="country_code")

    start = find_fixed_field_start(tokens)
    if start is None:
        raise FixedFieldBoundaryError("No token starts with a document number")

    block = assemble_fixed_fields(tokens, start)
    if len(block) < _MIN_BLOCK_LENGTH:
        raise FieldFormatError(
            f"Fixed-field block is {len(block)} characters, expected at least {_MIN_BLOCK_LENGTH}",
            field="fixed_fields",
        )

    return ParsedRecord(
        document_type=tokens[0][0],
        country_code=tokens[1][:3],
        surname=tokens[1][3:],
        given_names=extract_given_names(tokens, start),
        document_number=block[_DOCUMENT_NUMBER],
        document_number_check_digit=_check_digit_at(block, _DOCUMENT_NUMBER_CHECK, "document_number"),
        issuing_state=block[_ISSUING_STATE],
        birth_date=_date_at(block, _BIRTH_DATE, "birth_date"),
        birth_date_check_digit=_check_digit_at(block, _BIRTH_DATE_CHECK, "birth_date"),
        sex_marker=block[_SEX],
        expiry_date=_date_at(block, _EXPIRY_DATE, "expiry_date"),
        expiry_date_check_digit=_check_digit_at(block, _EXPIRY_DATE_CHECK, "expiry_date"),
        composite_check_digit=_composite_check_digit(tokens[-1]),
    )
