"""SQLModel-backed store (SQLite for local development, any SQLAlchemy URL)."""

from typing import Any, Dict, List, Optional, Type, TypeVar

from sqlalchemy import delete, update
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, select

from file_converter.db.tables import ConversionJob, ConversionPreset
from file_converter.storage.base import ConversionStore

Row = TypeVar("Row", ConversionJob, ConversionPreset)


class SQLStore(ConversionStore):
    backend = "sqlite"

    def __init__(self, engine: Engine):
        self._engine = engine

    # -- generic helpers --------------------------------------------------

    def _insert(self, row: SQLModel) -> Any:
        with Session(self._engine) as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return row

    def _get_owned(self, model: Type[Row], row_id: str, user_id: str) -> Optional[Row]:
        with Session(self._engine) as session:
            statement = select(model).where(model.id == row_id, model.user_id == user_id)
            return session.exec(statement).first()

    def _list_owned(self, model: Type[Row], user_id: str) -> List[Row]:
        with Session(self._engine) as session:
            statement = select(model).where(model.user_id == user_id)
            return list(session.exec(statement).all())

    def _update_owned(
        self, model: Type[Row], row_id: str, user_id: str, changes: Dict[str, Any]
    ) -> Optional[Row]:
        statement = (
            update(model)
            .where(model.id == row_id, model.user_id == user_id)
            .values(**changes)
        )
        with Session(self._engine) as session:
            result = session.connection().execute(statement)
            if result.rowcount == 0:
                session.rollback()
                return None
            session.commit()
            return session.get(model, row_id)

    # -- jobs ---------------------------------------------------------------

    def insert_job(self, job: ConversionJob) -> ConversionJob:
        return self._insert(job)

    def get_job(self, job_id: str, user_id: str) -> Optional[ConversionJob]:
        return self._get_owned(ConversionJob, job_id, user_id)

    def update_job(self, job_id, user_id, changes):
        return self._update_owned(ConversionJob, job_id, user_id, changes)

    def list_jobs(self, user_id: str) -> List[ConversionJob]:
        return self._list_owned(ConversionJob, user_id)

    # -- presets ------------------------------------------------------------

    def insert_preset(self, preset: ConversionPreset) -> ConversionPreset:
        return self._insert(preset)

    def get_preset(self, preset_id: str, user_id: str) -> Optional[ConversionPreset]:
        return self._get_owned(ConversionPreset, preset_id, user_id)

    def update_preset(self, preset_id, user_id, changes):
        return self._update_owned(ConversionPreset, preset_id, user_id, changes)

    def delete_preset(self, preset_id: str, user_id: str) -> bool:
        statement = delete(ConversionPreset).where(
            ConversionPreset.id == preset_id,
            ConversionPreset.user_id == user_id,
        )
        with Session(self._engine) as session:
            result = session.connection().execute(statement)
            session.commit()
            return result.rowcount > 0

    def list_presets(self, user_id: str) -> List[ConversionPreset]:
        return self._list_owned(ConversionPreset, user_id)
