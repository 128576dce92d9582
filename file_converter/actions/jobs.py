"""Conversion job actions: create, update, get, list."""

import logging
from datetime import datetime, timezone

from file_converter.actions.context import ActionContext, require_user
from file_converter.actions.errors import ActionError, NOT_FOUND
from file_converter.actions.registry import define_action
from file_converter.actions.schemas import CreateJobInput, IdInput, UpdateJobInput
from file_converter.db.tables import ConversionJob, JobStatus

logger = logging.getLogger(__name__)


def _job_not_found() -> ActionError:
    return ActionError(NOT_FOUND, "Conversion job not found.")


@define_action("createConversionJob", CreateJobInput)
def create_conversion_job(data: CreateJobInput, context: ActionContext):
    user = require_user(context)

    fields = data.model_dump(exclude_unset=True)
    fields.setdefault("status", JobStatus.QUEUED)
    job = ConversionJob(
        **fields,
        user_id=user.id,
        created_at=datetime.now(timezone.utc),
    )
    job = context.store.insert_job(job)
    logger.info("Created conversion job %s for user %s", job.id, user.id)
    return {"success": True, "data": {"job": job}}


@define_action("updateConversionJob", UpdateJobInput)
def update_conversion_job(data: UpdateJobInput, context: ActionContext):
    """Overwrite only the supplied fields of a job owned by the caller.

    No status transitions are enforced and ``completed_at`` is never derived
    from ``status``.
    """
    user = require_user(context)

    changes = data.changes()
    job = context.store.update_job(data.id, user.id, changes)
    if job is None:
        logger.info("Job %s not found for user %s", data.id, user.id)
        raise _job_not_found()

    logger.info("Updated conversion job %s fields=%s", job.id, sorted(changes))
    return {"success": True, "data": {"job": job}}


@define_action("getConversionJob", IdInput)
def get_conversion_job(data: IdInput, context: ActionContext):
    user = require_user(context)
    job = context.store.get_job(data.id, user.id)
    if job is None:
        raise _job_not_found()
    return {"success": True, "data": {"job": job}}


@define_action("listConversionJobs")
def list_conversion_jobs(_data, context: ActionContext):
    user = require_user(context)
    jobs = context.store.list_jobs(user.id)
    return {"success": True, "data": {"items": jobs, "total": len(jobs)}}
