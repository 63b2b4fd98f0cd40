"""
Pydantic schemas for the clean API.

Form decoding is permissive: a value outside its field's domain falls back
to the field default instead of failing the request.
"""
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sheet_cleanup.cleaners.config import CleaningConfig, DateFormat, OutputFormat, TextCase


def split_names(value: Any) -> List[str]:
    """Split a comma-separated name list, trimming names and dropping blanks."""
    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split(",")
    else:
        parts = [str(v) for v in value]
    return [p.strip() for p in parts if p.strip()]


class CleanOptions(BaseModel):
    """Cleaning options as sent by the front-end form (camelCase names)."""

    model_config = ConfigDict(populate_by_name=True)

    columns: List[str] = Field(default_factory=list)
    trim: bool = True
    collapse_spaces: bool = Field(True, alias="collapseSpaces")
    text_case: TextCase = Field(TextCase.NONE, alias="textCase")
    date_format: DateFormat = Field(DateFormat.NONE, alias="dateFormat")
    dedupe_keys: List[str] = Field(default_factory=list, alias="dedupeKeys")
    drop_empty_rows: bool = Field(True, alias="dropEmptyRows")
    drop_empty_cols: bool = Field(True, alias="dropEmptyCols")
    normalize_types: bool = Field(False, alias="normalizeTypes")
    validate_email: bool = Field(False, alias="validateEmail")
    remove_invalid_emails: bool = Field(False, alias="removeInvalidEmails")
    validate_url: bool = Field(False, alias="validateUrl")
    remove_invalid_urls: bool = Field(False, alias="removeInvalidUrls")
    output_format: OutputFormat = Field(OutputFormat.CSV, alias="outputFormat")
    keep_order: bool = Field(True, alias="keepOrder")

    @field_validator("columns", "dedupe_keys", mode="before")
    @classmethod
    def split_name_list(cls, v: Any) -> List[str]:
        return split_names(v)

    @field_validator("text_case", "date_format", "output_format", mode="before")
    @classmethod
    def lowercase_enum(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator(
        "trim",
        "collapse_spaces",
        "text_case",
        "date_format",
        "drop_empty_rows",
        "drop_empty_cols",
        "normalize_types",
        "validate_email",
        "remove_invalid_emails",
        "validate_url",
        "remove_invalid_urls",
        "output_format",
        "keep_order",
        mode="wrap",
    )
    @classmethod
    def default_on_invalid(cls, v: Any, handler, info) -> Any:
        try:
            return handler(v)
        except ValidationError:
            return cls.model_fields[info.field_name].default

    @classmethod
    def from_form(cls, form: dict) -> "CleanOptions":
        """Build options from raw form values, ignoring fields that were not sent."""
        return cls.model_validate({k: v for k, v in form.items() if v is not None})

    def to_config(self) -> CleaningConfig:
        """Convert to the engine's configuration record."""
        return CleaningConfig(
            columns=list(self.columns),
            trim=self.trim,
            collapse_spaces=self.collapse_spaces,
            text_case=self.text_case,
            date_format=self.date_format,
            normalize_types=self.normalize_types,
            dedupe_keys=list(self.dedupe_keys),
            drop_empty_rows=self.drop_empty_rows,
            drop_empty_cols=self.drop_empty_cols,
            validate_email=self.validate_email,
            remove_invalid_emails=self.remove_invalid_emails,
            validate_url=self.validate_url,
            remove_invalid_urls=self.remove_invalid_urls,
            output_format=self.output_format,
            keep_order=self.keep_order,
        )


class HeadersResponse(BaseModel):
    """Header row of an uploaded file."""

    filename: str
    headers: List[str]
