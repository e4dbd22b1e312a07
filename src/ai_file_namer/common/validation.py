"""Validation for the filename form's ``description`` field."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import BaseModel, ValidationError, field_validator

MIN_LENGTH = 10
MAX_LENGTH = 500


class DescriptionError(ValueError):
    message = "Invalid description."

    def __init__(self) -> None:
        super().__init__(self.message)


class EmptyInput(DescriptionError):
    message = "A description is required to generate filenames."


class TooShort(DescriptionError):
    message = f"The description must be at least {MIN_LENGTH} characters long."


class TooLong(DescriptionError):
    message = f"The description is too long (max {MAX_LENGTH} characters)."


class FilenameForm(BaseModel):
    """Form payload. ``description`` matches the textarea's name attribute."""
    description: str

    @field_validator("description", mode="before")
    @classmethod
    def _check_description(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise EmptyInput()
        value = value.strip()
        if not value:
            raise EmptyInput()
        if len(value) < MIN_LENGTH:
            raise TooShort()
        if len(value) > MAX_LENGTH:
            raise TooLong()
        return value


@dataclass
class FormResult:
    value: str | None = None
    errors: list[str] = field(default_factory=list)
    kinds: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors


def _cause(err: Mapping[str, Any]) -> DescriptionError:
    cause = (err.get("ctx") or {}).get("error")
    if isinstance(cause, DescriptionError):
        return cause
    # missing field
    return EmptyInput()


def validate_form(data: Mapping[str, Any]) -> FormResult:
    """
    Validate a form mapping containing a ``description`` field.

    Args:
        data: Submitted form data.

    Returns:
        FormResult with the trimmed description, or the field-level messages.
    """
    try:
        form = FilenameForm.model_validate(dict(data))
    except ValidationError as e:
        result = FormResult()
        for err in e.errors():
            cause = _cause(err)
            result.errors.append(cause.message)
            result.kinds.append(type(cause).__name__)
        return result
    return FormResult(value=form.description)


def validate_description(value: Any) -> str:
    """Return the trimmed description or raise the matching ``DescriptionError``."""
    try:
        return FilenameForm(description=value).description
    except ValidationError as e:
        raise _cause(e.errors()[0]) from None
