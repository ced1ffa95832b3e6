from .checksum import char_value, check_digit
from .exceptions import (
    CheckDigitFormatError,
    FieldFormatError,
    FixedFieldBoundaryError,
    InsufficientTokensError,
    MRZParseError,
    ParseErrorCode,
)
from .extractor import assemble_fixed_fields, extract_given_names, find_fixed_field_start, parse_tokens
from .logging import configure_logging, get_logger
from .models import CheckResults, ParsedRecord, ValidationReport
from .settings import MRZSettings, get_settings
from .tokenizer import FILLER, join_lines, tokenize
from .validator import MRZValidator, assemble_name, check_mrz, compute_checks, parse_mrz, validate

__all__ = [
    "char_value",
    "check_digit",
    "CheckDigitFormatError",
    "FieldFormatError",
    "FixedFieldBoundaryError",
    "InsufficientTokensError",
    "MRZParseError",
    "ParseErrorCode",
    "assemble_fixed_fields",
    "extract_given_names",
    "find_fixed_field_start",
    "parse_tokens",
    "configure_logging",
    "get_logger",
    "CheckResults",
    "ParsedRecord",
    "ValidationReport",
    "MRZSettings",
    "get_settings",
    "FILLER",
    "join_lines",
    "tokenize",
    "MRZValidator",
    "assemble_name",
    "check_mrz",
    "compute_checks",
    "parse_mrz",
    "validate",
]
