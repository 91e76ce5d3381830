"""Tests for resume upload, list and delete"""
from unittest.mock import patch

MIB = 1024 * 1024


def _upload(client, profile_id, name="cv.pdf", content=b"%PDF-1.4 test", mime="application/pdf"):
    return client.post(f"/api/profile/{profile_id}/resume", files={"resume": (name, content, mime)})


def test_upload_pdf_creates_record_and_file(client, profile_id, resume_dir):
    r = _upload(client, profile_id)
    assert r.status_code == 201
    data = r.json()
    assert data["id"] == 1
    assert data["profileId"] == profile_id
    assert data["originalName"] == "cv.pdf"
    assert data["fileSize"] == len(b"%PDF-1.4 test")
    assert data["mimeType"] == "application/pdf"
    assert data["filename"].endswith(".pdf") and data["filename"] != "cv.pdf"
    assert data["parsedData"] is None and data["parsingAccuracy"] is None
    assert "uploadedAt" in data
    assert (resume_dir / data["filename"]).read_bytes() == b"%PDF-1.4 test"

    listed = client.get(f"/api/profile/{profile_id}/resume").json()
    assert listed == [data]


def test_upload_docx_allowed(client, profile_id):
    r = _upload(
        client, profile_id, name="CV.DOCX",
        mime="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    )
    assert r.status_code == 201
    assert r.json()["filename"].endswith(".docx")


def test_upload_rejects_oversized_file(client, profile_id, resume_dir):
    r = _upload(client, profile_id, content=b"x" * (6 * MIB))
    assert r.status_code == 400
    assert "too large" in r.json()["message"]
    assert client.get(f"/api/profile/{profile_id}/resume").json() == []
    assert not resume_dir.exists() or list(resume_dir.iterdir()) == []


def test_upload_accepts_file_at_size_limit(client, profile_id):
    r = _upload(client, profile_id, content=b"x" * (5 * MIB))
    assert r.status_code == 201
    assert r.json()["fileSize"] == 5 * MIB


def test_upload_rejects_disallowed_extension(client, profile_id):
    r = _upload(client, profile_id, name="cv.exe", mime="application/octet-stream")
    assert r.status_code == 400
    assert r.json()["message"].startswith("Invalid file type")
    assert client.get(f"/api/profile/{profile_id}/resume").json() == []


def test_upload_requires_a_file(client, profile_id):
    r = client.post(f"/api/profile/{profile_id}/resume", data={"note": "no file"})
    assert r.status_code == 400
    assert r.json() == {"message": "No file uploaded"}


def test_upload_rejects_multiple_files(client, profile_id):
    files = [
        ("resume", ("a.pdf", b"a", "application/pdf")),
        ("resume", ("b.pdf", b"b", "application/pdf")),
    ]
    r = client.post(f"/api/profile/{profile_id}/resume", files=files)
    assert r.status_code == 400
    assert client.get(f"/api/profile/{profile_id}/resume").json() == []


def test_upload_storage_failure_returns_500_without_record(client, profile_id, file_storage):
    with patch.object(file_storage, "save", side_effect=RuntimeError("disk full")):
        r = _upload(client, profile_id)
    assert r.status_code == 500
    assert r.json() == {"message": "Failed to upload resume"}
    assert client.get(f"/api/profile/{profile_id}/resume").json() == []


def test_delete_resume_removes_record_and_file(client, profile_id, resume_dir):
    data = _upload(client, profile_id).json()
    r = client.delete(f"/api/resume/{data['id']}")
    assert r.status_code == 204
    assert not (resume_dir / data["filename"]).exists()
    assert client.get(f"/api/profile/{profile_id}/resume").json() == []
    assert client.delete(f"/api/resume/{data['id']}").status_code == 404


def test_delete_resume_not_found(client):
    r = client.delete("/api/resume/42")
    assert r.status_code == 404
    assert r.json() == {"message": "Resume file not found"}


def test_resume_counts_toward_completion(client, profile_id):
    _upload(client, profile_id)
    data = client.get(f"/api/profile/{profile_id}/completion").json()
    resume_section = [s for s in data["sections"] if s["name"] == "Resume"][0]
    assert resume_section["completed"] is True


def test_upload_writes_bytes_off_the_event_loop(client, profile_id, file_storage, monkeypatch):
    from profile_builder.app.api.v1 import resume as resume_routes

    calls = []
    original = resume_routes.run_in_threadpool

    async def recording_run_in_threadpool(func, *args, **kwargs):
        calls.append(func)
        return await original(func, *args, **kwargs)

    monkeypatch.setattr(resume_routes, "run_in_threadpool", recording_run_in_threadpool)
    r = _upload(client, profile_id)
    assert r.status_code == 201
    assert calls == [file_storage.save]
