"""Upload and moderation over HTTP, through the SQLAlchemy repositories."""

import pytest

from voices.db.database import SessionLocal
from voices.infrastructure.orm.submission_model import SubmissionModel

AUDIO = b"ID3" + b"\x01" * 2048


def upload(client, filename="coke.mp3", content_type="audio/mpeg", data=AUDIO, **fields):
    form = {
        "readerName": "Jane Reader",
        "email": "jane@example.com",
        "poemSlug": "having-a-coke-with-you",
        "location": "Brooklyn",
    }
    form.update(fields)
    files = {"audioFile": (filename, data, content_type)} if data is not None else None
    return client.post("/api/submissions", data=form, files=files)


def approval_token(submission_id: int) -> str:
    db = SessionLocal()
    try:
        return db.query(SubmissionModel).filter(SubmissionModel.id == submission_id).one().approval_token
    finally:
        db.close()


class TestSubmissionIntake:

    def test_accepts_upload(self, client, storage, email):
        response = upload(client)

        assert response.status_code == 200, response.text
        body = response.json()
        assert isinstance(body["submissionId"], int)
        assert "reviewed" in body["message"]
        assert len(storage.blobs) == 1
        assert len(email.sent) == 1

    def test_missing_file(self, client):
        response = upload(client, data=None)
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Audio file is required"
        assert body["errors"][0]["field"] == "audioFile"

    def test_text_file_is_rejected(self, client, storage):
        response = upload(client, filename="poem.mp3", content_type="text/plain", data=b"not audio")
        assert response.status_code == 400
        assert storage.blobs == {}

    @pytest.mark.parametrize("content_type", ["video/mpeg", "application/x-unknown", "binary/octet-stream"])
    def test_audio_extension_overrides_unlisted_type(self, client, storage, content_type):
        response = upload(client, filename="coke.mp3", content_type=content_type)
        assert response.status_code == 200, response.text
        assert len(storage.blobs) == 1

    def test_missing_fields_are_listed(self, client):
        response = upload(client, readerName="", email="nope")
        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"readerName", "email"}

    def test_unknown_poem(self, client, storage):
        response = upload(client, poemSlug="meditations-in-an-emergency")
        assert response.status_code == 404
        assert storage.blobs == {}


class TestModerationScenario:

    def test_approve_via_email_link(self, client, admin_headers, email):
        submission_id = upload(client).json()["submissionId"]

        pending = client.get("/api/admin/submissions/pending", headers=admin_headers).json()
        assert [(s["id"], s["poemTitle"], s["status"]) for s in pending] == [
            (submission_id, "Having a Coke With You", "pending")
        ]

        token = approval_token(submission_id)
        response = client.get(f"/api/admin/approve/{token}")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Submission Approved" in response.text

        recordings = client.get("/api/recordings").json()
        assert len(recordings) == 1
        assert recordings[0]["submissionId"] == submission_id
        assert recordings[0]["readerName"] == "Jane Reader"
        assert "email" not in recordings[0]

        assert client.get("/api/poems/stats").json() == {"having-a-coke-with-you": 1, "ave-maria": 0}
        assert client.get("/api/admin/submissions/pending", headers=admin_headers).json() == []
        assert email.sent[-1][0] == "jane@example.com"

        again = client.get(f"/api/admin/approve/{token}")
        assert again.status_code == 409
        assert "Already Processed" in again.text
        assert len(client.get("/api/recordings").json()) == 1

        stats = client.get("/api/admin/stats", headers=admin_headers).json()
        assert stats == {"pending": 0, "approved": 1, "rejected": 0, "total": 1}

    def test_reject_via_email_link(self, client, admin_headers, storage):
        submission_id = upload(client).json()["submissionId"]
        token = approval_token(submission_id)
        key = next(iter(storage.blobs))

        response = client.get(f"/api/admin/reject/{token}")
        assert response.status_code == 200
        assert "Submission Rejected" in response.text
        assert storage.deleted == [key]

        again = client.get(f"/api/admin/reject/{token}")
        assert again.status_code == 409
        assert client.get("/api/recordings").json() == []

        stats = client.get("/api/admin/stats", headers=admin_headers).json()
        assert stats["rejected"] == 1
        assert stats["total"] == 1

    def test_unknown_token_page(self, client):
        response = client.get("/api/admin/approve/not-a-real-token")
        assert response.status_code == 404
        assert "Submission Not Found" in response.text

    def test_anonymous_recording(self, client):
        submission_id = upload(client, anonymous="true").json()["submissionId"]
        client.get(f"/api/admin/approve/{approval_token(submission_id)}")

        recording = client.get("/api/recordings").json()[0]
        assert recording["readerName"] == "Anonymous Reader"
        assert recording["anonymous"] is True
