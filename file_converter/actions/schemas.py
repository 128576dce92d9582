"""Input models for the conversion job and preset actions.

Optional fields default to "omitted". An explicit ``null`` is rejected so
that a provided value always means "overwrite with this", and an empty
string stays distinct from omission. Datetimes without an offset are read
as UTC.
"""

from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


class ActionInput(BaseModel):
    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Value must not be null")
        return value

    @field_validator("*", mode="after")
    @classmethod
    def _assume_utc(cls, value: Any) -> Any:
        # the store only accepts aware datetimes; naive input is taken as UTC
        if isinstance(value, datetime) and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class UpdateInput(ActionInput):
    """Update payload: ``id`` plus at least one mutable field."""

    mutable_fields: ClassVar[Tuple[str, ...]] = ()

    id: str = Field(min_length=1)

    @model_validator(mode="after")
    def _require_one_change(self):
        if not any(name in self.model_fields_set for name in self.mutable_fields):
            raise ValueError("At least one field must be provided to update.")
        return self

    def changes(self) -> Dict[str, Any]:
        """Only the mutable fields the caller actually supplied."""
        return {
            name: getattr(self, name)
            for name in self.mutable_fields
            if name in self.model_fields_set
        }


class IdInput(ActionInput):
    id: str = Field(min_length=1)


class CreateJobInput(ActionInput):
    source_format: Optional[str] = None
    target_format: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    input_file_name: Optional[str] = None
    input_file_url: Optional[str] = None
    output_file_name: Optional[str] = None
    output_file_url: Optional[str] = None
    settings_json: Optional[str] = None
    error_message: Optional[str] = None
    input_size_bytes: Optional[int] = Field(default=None, ge=0)
    output_size_bytes: Optional[int] = Field(default=None, ge=0)
    completed_at: Optional[datetime] = None


class UpdateJobInput(UpdateInput):
    mutable_fields: ClassVar[Tuple[str, ...]] = (
        "status",
        "output_file_name",
        "output_file_url",
        "settings_json",
        "error_message",
        "input_size_bytes",
        "output_size_bytes",
        "completed_at",
    )

    status: Optional[str] = None
    output_file_name: Optional[str] = None
    output_file_url: Optional[str] = None
    settings_json: Optional[str] = None
    error_message: Optional[str] = None
    input_size_bytes: Optional[int] = Field(default=None, ge=0)
    output_size_bytes: Optional[int] = Field(default=None, ge=0)
    completed_at: Optional[datetime] = None


class CreatePresetInput(ActionInput):
    name: str = Field(min_length=1)
    source_format: Optional[str] = None
    target_format: Optional[str] = None
    category: Optional[str] = None
    settings_json: Optional[str] = None


class UpdatePresetInput(UpdateInput):
    mutable_fields: ClassVar[Tuple[str, ...]] = (
        "name",
        "source_format",
        "target_format",
        "category",
        "settings_json",
    )

    name: Optional[str] = Field(default=None, min_length=1)
    source_format: Optional[str] = None
    target_format: Optional[str] = None
    category: Optional[str] = None
    settings_json: Optional[str] = None
