from datetime import datetime, timedelta, timezone

import pytest

from file_converter.actions import jobs
from file_converter.actions.errors import ActionError


def _utc(value):
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def test_create_job_defaults(alice):
    result = jobs.create_conversion_job({}, alice)

    assert result["success"] is True
    job = result["data"]["job"]
    assert job.id
    assert job.user_id == "alice"
    assert job.status == "queued"
    assert job.created_at is not None
    assert job.source_format is None
    assert job.completed_at is None


def test_create_job_generates_distinct_ids(alice):
    ids = {jobs.create_conversion_job({}, alice)["data"]["job"].id for _ in range(5)}
    assert len(ids) == 5


def test_create_job_passes_fields_through(alice):
    payload = {
        "source_format": "pdf",
        "target_format": "png",
        "category": "document",
        "status": "processing",
        "input_file_name": "report.pdf",
        "input_file_url": "s3://bucket/report.pdf",
        "settings_json": '{"dpi": 300}',
        "input_size_bytes": 2048,
    }
    job = jobs.create_conversion_job(payload, alice)["data"]["job"]

    for key, value in payload.items():
        assert getattr(job, key) == value


def test_create_job_accepts_any_status_string(alice):
    job = jobs.create_conversion_job({"status": "paused-by-admin"}, alice)["data"]["job"]
    assert job.status == "paused-by-admin"


def test_create_job_requires_user(anonymous):
    with pytest.raises(ActionError) as exc_info:
        jobs.create_conversion_job({}, anonymous)
    assert exc_info.value.code == "UNAUTHORIZED"


def test_create_job_rejects_negative_size(alice):
    with pytest.raises(ActionError) as exc_info:
        jobs.create_conversion_job({"input_size_bytes": -1}, alice)
    assert exc_info.value.code == "BAD_REQUEST"
    assert "input_size_bytes" in exc_info.value.message


def test_update_job_requires_a_field(alice, store):
    job = jobs.create_conversion_job({"source_format": "pdf"}, alice)["data"]["job"]

    with pytest.raises(ActionError) as exc_info:
        jobs.update_conversion_job({"id": job.id}, alice)

    assert exc_info.value.code == "BAD_REQUEST"
    assert exc_info.value.message == "At least one field must be provided to update."
    assert store.get_job(job.id, "alice").model_dump() == job.model_dump()


def test_update_job_requires_id(alice):
    with pytest.raises(ActionError) as exc_info:
        jobs.update_conversion_job({"id": "", "status": "failed"}, alice)
    assert exc_info.value.code == "BAD_REQUEST"


def test_update_job_only_touches_supplied_fields(alice):
    job = jobs.create_conversion_job(
        {
            "source_format": "docx",
            "target_format": "pdf",
            "output_file_url": "s3://out/old.pdf",
            "settings_json": '{"a": 1}',
            "output_size_bytes": 10,
        },
        alice,
    )["data"]["job"]
    before = job.model_dump()
    completed = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    updated = jobs.update_conversion_job(
        {"id": job.id, "status": "completed", "completed_at": completed}, alice
    )["data"]["job"]

    after = updated.model_dump()
    assert after["status"] == "completed"
    assert _utc(after["completed_at"]) == completed
    for key in before:
        if key not in ("status", "completed_at"):
            assert after[key] == before[key], key


def test_update_job_empty_string_is_not_omission(alice):
    job = jobs.create_conversion_job({"error_message": "boom"}, alice)["data"]["job"]

    updated = jobs.update_conversion_job({"id": job.id, "error_message": ""}, alice)["data"]["job"]

    assert updated.error_message == ""


def test_update_job_rejects_explicit_null(alice):
    job = jobs.create_conversion_job({}, alice)["data"]["job"]

    with pytest.raises(ActionError) as exc_info:
        jobs.update_conversion_job({"id": job.id, "status": None}, alice)
    assert exc_info.value.code == "BAD_REQUEST"


def test_update_job_does_not_derive_completed_at(alice):
    job = jobs.create_conversion_job({}, alice)["data"]["job"]

    updated = jobs.update_conversion_job({"id": job.id, "status": "completed"}, alice)["data"]["job"]

    assert updated.completed_at is None


def test_update_job_allows_any_transition(alice):
    job = jobs.create_conversion_job({"status": "completed"}, alice)["data"]["job"]
    updated = jobs.update_conversion_job({"id": job.id, "status": "queued"}, alice)["data"]["job"]
    assert updated.status == "queued"


def test_update_job_of_other_user_is_not_found(alice, bob, store):
    job = jobs.create_conversion_job({}, alice)["data"]["job"]

    with pytest.raises(ActionError) as exc_info:
        jobs.update_conversion_job({"id": job.id, "status": "failed"}, bob)

    assert exc_info.value.code == "NOT_FOUND"
    assert exc_info.value.message == "Conversion job not found."
    assert store.get_job(job.id, "alice").status == "queued"


def test_update_missing_job_is_not_found(alice):
    with pytest.raises(ActionError) as exc_info:
        jobs.update_conversion_job({"id": "missing", "status": "failed"}, alice)
    assert exc_info.value.code == "NOT_FOUND"


def test_update_job_checks_auth_before_input(anonymous):
    with pytest.raises(ActionError) as exc_info:
        jobs.update_conversion_job({}, anonymous)
    assert exc_info.value.code == "UNAUTHORIZED"


def test_list_jobs_is_scoped_to_owner(alice, bob):
    jobs.create_conversion_job({"category": "image"}, alice)
    jobs.create_conversion_job({"category": "audio"}, alice)
    jobs.create_conversion_job({"category": "video"}, bob)

    data = jobs.list_conversion_jobs(None, alice)["data"]

    assert data["total"] == 2
    assert {j.user_id for j in data["items"]} == {"alice"}
    assert jobs.list_conversion_jobs(None, bob)["data"]["total"] == 1


def test_get_job(alice, bob):
    job = jobs.create_conversion_job({"target_format": "mp3"}, alice)["data"]["job"]

    assert jobs.get_conversion_job({"id": job.id}, alice)["data"]["job"].target_format == "mp3"
    with pytest.raises(ActionError) as exc_info:
        jobs.get_conversion_job({"id": job.id}, bob)
    assert exc_info.value.code == "NOT_FOUND"


def test_naive_completed_at_is_stored_as_utc(alice):
    job = jobs.create_conversion_job({"completed_at": "2026-03-01T12:00:00"}, alice)["data"]["job"]
    assert _utc(job.completed_at) == datetime(2026, 3, 1, 12, tzinfo=timezone.utc)

    updated = jobs.update_conversion_job(
        {"id": job.id, "completed_at": datetime(2026, 3, 2, 9, 30)}, alice
    )["data"]["job"]
    assert _utc(updated.completed_at) == datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc)


def test_completed_at_with_offset_keeps_its_instant(alice):
    job = jobs.create_conversion_job({}, alice)["data"]["job"]

    updated = jobs.update_conversion_job(
        {"id": job.id, "completed_at": "2026-03-01T12:00:00+05:00"}, alice
    )["data"]["job"]

    expected = datetime(2026, 3, 1, 12, tzinfo=timezone(timedelta(hours=5)))
    assert _utc(updated.completed_at) == expected
