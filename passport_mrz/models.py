from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MRZBaseModel(BaseModel):
    """Immutable base with strict validation and forbidden unknown fields."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)


class ParsedRecord(MRZBaseModel):
    document_type: str = Field(min_length=1, max_length=1)
    country_code: str = Field(min_length=3, max_length=3)
    surname: str
    given_names: tuple[str, ...] = ()
    document_number: str = Field(min_length=9, max_length=9)
    document_number_check_digit: int = Field(ge=0, le=9)
    issuing_state: str = Field(min_length=3, max_length=3)
    birth_date: str = Field(pattern=r"^[0-9]{6}$")
    birth_date_check_digit: int = Field(ge=0, le=9)
    sex_marker: str = Field(min_length=1, max_length=1)
    expiry_date: str = Field(pattern=r"^[0-9]{6}$")
    expiry_date_check_digit: int = Field(ge=0, le=9)
    composite_check_digit: int = Field(ge=0, le=9)

    @property
    def composite_source(self) -> str:
        """Concatenation the composite check digit is computed over."""
        return (
            f"{self.document_number}{self.document_number_check_digit}"
            f"{self.birth_date}{self.birth_date_check_digit}"
            f"{self.expiry_date}{self.expiry_date_check_digit}"
        )


class CheckResults(MRZBaseModel):
    document_number: bool
    birth_date: bool
    expiry_date: bool
    composite: bool

    @property
    def all_passed(self) -> bool:
        return self.document_number and self.birth_date and self.expiry_date and self.composite


class ValidationReport(MRZBaseModel):
    valid: bool
    name: str
    checks: CheckResults

    def as_tuple(self) -> tuple[bool, str]:
        return self.valid, self.name
