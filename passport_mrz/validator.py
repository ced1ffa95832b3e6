from __future__ import annotations

from dataclasses import dataclass

import structlog

from .checksum import matches
from .exceptions import MRZParseError
from .extractor import parse_tokens
from .logging import get_logger, mask_sensitive
from .models import CheckResults, ParsedRecord, ValidationReport
from .settings import MRZSettings, get_settings
from .tokenizer import join_lines, tokenize


def compute_checks(record: ParsedRecord) -> CheckResults:
    # Every check is computed; none is skipped once another has failed.
    return CheckResults(
        document_number=matches(record.document_number, record.document_number_check_digit),
        birth_date=matches(record.birth_date, record.birth_date_check_digit),
        expiry_date=matches(record.expiry_date, record.expiry_date_check_digit),
        composite=matches(record.composite_source, record.composite_check_digit),
    )


def assemble_name(record: ParsedRecord) -> str:
    return f"{' '.join(record.given_names)} {record.surname}"


@dataclass
class MRZValidator:
    logger: structlog.stdlib.BoundLogger
    mask_names: bool = True

    @classmethod
    def from_settings(cls, config: MRZSettings | None = None) -> MRZValidator:
        config = config or get_settings()
        return cls(logger=get_logger("mrz_validator"), mask_names=config.mask_names)

    def parse(self, mrz: str) -> ParsedRecord:
        tokens = tokenize(join_lines(mrz))
        try:
            return parse_tokens(tokens)
        except MRZParseError as exc:
            self.logger.warning(
                "mrz_parse_failed",
                code=exc.code.value,
                field=exc.field,
                error=str(exc),
                token_count=len(tokens),
            )
            raise

    def check(self, mrz: str) -> ValidationReport:
        """Parse ``mrz`` and compare all four check digits.

        Structural problems raise :class:`MRZParseError`; checksum
        mismatches only flip ``valid`` to False. The name is assembled
        either way.
        """
        record = self.parse(mrz)
        checks = compute_checks(record)
        report = ValidationReport(valid=checks.all_passed, name=assemble_name(record), checks=checks)
        self.logger.info(
            "mrz_validated",
            valid=report.valid,
            checks=checks.model_dump(),
            document_type=record.document_type,
            country_code=record.country_code,
            name=mask_sensitive(report.name) if self.mask_names else report.name,
        )
        return report

    def validate(self, mrz: str) -> tuple[bool, str]:
        return self.check(mrz).as_tuple()


def _default_validator() -> MRZValidator:
    # Resolved per call so logging turned on after import is picked up; names stay masked.
    return MRZValidator(logger=get_logger("mrz_validator"))


def parse_mrz(mrz: str) -> ParsedRecord:
    return _default_validator().parse(mrz)


def check_mrz(mrz: str) -> ValidationReport:
    return _default_validator().check(mrz)


def validate(mrz: str) -> tuple[bool, str]:
    """Return ``(valid, name)`` for a TD3 machine-readable zone."""
    return _default_validator().validate(mrz)
