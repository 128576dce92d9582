"""Relational schema for conversion jobs and presets.

Both tables carry an owner reference (``user_id``) that is set on insert and
never rewritten. Format, category, status and settings columns are opaque
text passed through from callers.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlmodel import SQLModel, Field

JOBS_TABLE = "file_conversion_jobs"
PRESETS_TABLE = "file_conversion_presets"


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JobStatus:
    """Conventional job status labels. Not enforced; any string is stored."""
    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class ConversionJob(SQLModel, table=True):
    __tablename__ = JOBS_TABLE

    id: str = Field(default_factory=_new_id, primary_key=True, nullable=False)
    user_id: str = Field(index=True, nullable=False)

    # basic job info
    source_format: Optional[str] = None   # "pdf", "docx", "jpg"
    target_format: Optional[str] = None   # "png", "txt"
    category: Optional[str] = None        # "document", "image", "audio", ...
    status: Optional[str] = Field(default=JobStatus.QUEUED)

    # storage references (URLs or storage keys)
    input_file_name: Optional[str] = None
    input_file_url: Optional[str] = None
    output_file_name: Optional[str] = None
    output_file_url: Optional[str] = None

    settings_json: Optional[str] = None
    error_message: Optional[str] = None

    input_size_bytes: Optional[int] = None
    output_size_bytes: Optional[int] = None

    created_at: datetime = Field(default_factory=_utcnow, nullable=False)
    completed_at: Optional[datetime] = None


class ConversionPreset(SQLModel, table=True):
    __tablename__ = PRESETS_TABLE

    id: str = Field(default_factory=_new_id, primary_key=True, nullable=False)
    user_id: str = Field(index=True, nullable=False)
    name: str = Field(nullable=False)  # "My PDF-to-PNG preset"
    source_format: Optional[str] = None
    target_format: Optional[str] = None
    category: Optional[str] = None
    settings_json: Optional[str] = None
    created_at: datetime = Field(default_factory=_utcnow, nullable=False)
