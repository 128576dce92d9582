"""Supabase (PostgREST) backed store using the service-role client."""

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import TypeAdapter
from supabase import Client

from file_converter.db.tables import (
    JOBS_TABLE,
    PRESETS_TABLE,
    ConversionJob,
    ConversionPreset,
)
from file_converter.storage.base import ConversionStore

Row = TypeVar("Row", ConversionJob, ConversionPreset)

_changes_adapter = TypeAdapter(Dict[str, Any])


class SupabaseStore(ConversionStore):
    """Each method issues exactly one PostgREST request.

    Updates and deletes filter on ``id`` and ``user_id`` together and rely on
    the returned representation to tell whether a row matched.
    """

    backend = "supabase"

    def __init__(self, client: Client):
        self._client = client

    def _insert(self, table: str, model: Type[Row], row: Row) -> Row:
        response = (
            self._client.table(table)
            .insert(row.model_dump(mode="json"))
            .execute()
        )
        return model.model_validate(response.data[0])

    def _get_owned(self, table: str, model: Type[Row], row_id: str, user_id: str) -> Optional[Row]:
        response = (
            self._client.table(table)
            .select("*")
            .eq("id", row_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return model.model_validate(response.data[0])

    def _list_owned(self, table: str, model: Type[Row], user_id: str) -> List[Row]:
        response = self._client.table(table).select("*").eq("user_id", user_id).execute()
        return [model.model_validate(row) for row in response.data or []]

    def _update_owned(
        self, table: str, model: Type[Row], row_id: str, user_id: str, changes: Dict[str, Any]
    ) -> Optional[Row]:
        response = (
            self._client.table(table)
            .update(_changes_adapter.dump_python(changes, mode="json"))
            .eq("id", row_id)
            .eq("user_id", user_id)
            .execute()
        )
        if not response.data:
            return None
        return model.model_validate(response.data[0])

    def insert_job(self, job: ConversionJob) -> ConversionJob:
        return self._insert(JOBS_TABLE, ConversionJob, job)

    def get_job(self, job_id: str, user_id: str) -> Optional[ConversionJob]:
        return self._get_owned(JOBS_TABLE, ConversionJob, job_id, user_id)

    def update_job(self, job_id, user_id, changes):
        return self._update_owned(JOBS_TABLE, ConversionJob, job_id, user_id, changes)

    def list_jobs(self, user_id: str) -> List[ConversionJob]:
        return self._list_owned(JOBS_TABLE, ConversionJob, user_id)

    def insert_preset(self, preset: ConversionPreset) -> ConversionPreset:
        return self._insert(PRESETS_TABLE, ConversionPreset, preset)

    def get_preset(self, preset_id: str, user_id: str) -> Optional[ConversionPreset]:
        return self._get_owned(PRESETS_TABLE, ConversionPreset, preset_id, user_id)

    def update_preset(self, preset_id, user_id, changes):
        return self._update_owned(PRESETS_TABLE, ConversionPreset, preset_id, user_id, changes)

    def delete_preset(self, preset_id: str, user_id: str) -> bool:
        response = (
            self._client.table(PRESETS_TABLE)
            .delete()
            .eq("id", preset_id)
            .eq("user_id", user_id)
            .execute()
        )
        return bool(response.data)

    def list_presets(self, user_id: str) -> List[ConversionPreset]:
        return self._list_owned(PRESETS_TABLE, ConversionPreset, user_id)
