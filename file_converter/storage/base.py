"""Storage interface for conversion jobs and presets."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from file_converter.db.tables import ConversionJob, ConversionPreset


class ConversionStore(ABC):
    """Abstract interface over the relational store (SQL or Supabase).

    Every read and mutation is scoped by owner: rows are matched on id AND
    ``user_id`` in a single statement, so a row owned by someone else behaves
    exactly like a missing one.
    """

    backend: str = "abstract"

    @abstractmethod
    def insert_job(self, job: ConversionJob) -> ConversionJob:
        """Persist a new job and return the stored row."""
        ...

    @abstractmethod
    def get_job(self, job_id: str, user_id: str) -> Optional[ConversionJob]:
        ...

    @abstractmethod
    def update_job(
        self, job_id: str, user_id: str, changes: Dict[str, Any]
    ) -> Optional[ConversionJob]:
        """Apply ``changes`` to the owned job. Returns None if no row matched."""
        ...

    @abstractmethod
    def list_jobs(self, user_id: str) -> List[ConversionJob]:
        ...

    @abstractmethod
    def insert_preset(self, preset: ConversionPreset) -> ConversionPreset:
        ...

    @abstractmethod
    def get_preset(self, preset_id: str, user_id: str) -> Optional[ConversionPreset]:
        ...

    @abstractmethod
    def update_preset(
        self, preset_id: str, user_id: str, changes: Dict[str, Any]
    ) -> Optional[ConversionPreset]:
        ...

    @abstractmethod
    def delete_preset(self, preset_id: str, user_id: str) -> bool:
        """Delete the owned preset. Returns False when zero rows were affected."""
        ...

    @abstractmethod
    def list_presets(self, user_id: str) -> List[ConversionPreset]:
        ...
