from __future__ import annotations

from enum import Enum


class ParseErrorCode(str, Enum):
    insufficient_tokens = "insufficient_tokens"
    fixed_field_boundary_not_found = "fixed_field_boundary_not_found"
    invalid_check_digit = "invalid_check_digit"
    invalid_field_format = "invalid_field_format"


class MRZParseError(Exception):
    """Raised when MRZ text is structurally malformed and cannot produce a record."""

    code: ParseErrorCode = ParseErrorCode.invalid_field_format

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InsufficientTokensError(MRZParseError):
    """Raised when the filler-delimited token sequence is too short to hold a TD3 record."""

    code = ParseErrorCode.insufficient_tokens


class FixedFieldBoundaryError(MRZParseError):
    """Raised when no token opens the fixed-field block."""

    code = ParseErrorCode.fixed_field_boundary_not_found


class CheckDigitFormatError(MRZParseError):
    """Raised when a check-digit position is absent or not a decimal digit."""

    code = ParseErrorCode.invalid_check_digit


class FieldFormatError(MRZParseError):
    """Raised when a mandatory field is absent or ill-formed."""

    code = ParseErrorCode.invalid_field_format
