"""Submission intake against the in-memory unit of work."""

import pytest

from voices.application.dtos.submission_dtos import SubmissionCommand
from voices.application.use_cases.submit_recording import SubmitRecordingUseCase
from voices.core.config import settings
from voices.domain.enums import SubmissionStatus
from voices.domain.exceptions import NotFoundError, ValidationError

AUDIO = b"ID3" + b"\x00" * 1024


def command(**overrides) -> SubmissionCommand:
    fields = {
        "readerName": "Jane Reader",
        "email": "jane@example.com",
        "poemSlug": "having-a-coke-with-you",
        "location": "Brooklyn",
    }
    fields.update(overrides)
    return SubmissionCommand.from_form(fields)


async def pending(uow):
    return await uow.submissions.list_by_status(SubmissionStatus.PENDING)


@pytest.fixture
def use_case(uow, storage, email):
    return SubmitRecordingUseCase(uow, storage, email)


class TestSubmitRecording:

    @pytest.mark.asyncio
    async def test_creates_pending_submission_and_notifies_moderator(self, use_case, uow, storage, email):
        result = await use_case.execute(command(), AUDIO, "coke.mp3", "audio/mpeg")

        submissions = await pending(uow)
        assert [s.id.value for s in submissions] == [result.submission_id]
        submission = submissions[0]
        assert submission.status == SubmissionStatus.PENDING
        assert submission.approval_token
        assert submission.file.storage_key in storage.blobs
        assert submission.file.original_name == "coke.mp3"
        assert submission.file.size == len(AUDIO)

        to_email, subject, html = email.sent[0]
        assert to_email == settings.MODERATOR_EMAIL
        assert "Having a Coke With You" in subject
        assert f"/admin/approve/{submission.approval_token}" in html
        assert f"/admin/reject/{submission.approval_token}" in html

    @pytest.mark.asyncio
    async def test_storage_key_does_not_reuse_original_name(self, use_case, uow):
        await use_case.execute(command(), AUDIO, "my reading.mp3", "audio/mpeg")
        submission = (await pending(uow))[0]
        assert "my reading" not in submission.file.storage_key
        assert submission.file.storage_key.endswith(".mp3")

    @pytest.mark.asyncio
    async def test_unknown_poem_stores_nothing(self, use_case, uow, storage, email):
        with pytest.raises(NotFoundError):
            await use_case.execute(command(poemSlug="the-day-lady-died"), AUDIO, "lady.mp3", "audio/mpeg")
        assert storage.blobs == {}
        assert await pending(uow) == []
        assert email.sent == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("data,filename,content_type", [
        (None, None, None),
        (b"", "empty.mp3", "audio/mpeg"),
        (b"hello", "notes.txt", "text/plain"),
        (b"hello", "sneaky.mp3", "text/plain"),
    ])
    async def test_rejects_bad_files(self, use_case, storage, data, filename, content_type):
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(command(), data, filename, content_type)
        assert exc_info.value.errors[0]["field"] == "audioFile"
        assert storage.blobs == {}

    @pytest.mark.asyncio
    async def test_rejects_oversized_file(self, use_case, storage, monkeypatch):
        monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_BYTES", 100)
        with pytest.raises(ValidationError):
            await use_case.execute(command(), b"x" * 101, "long.wav", "audio/wav")
        assert storage.blobs == {}

    @pytest.mark.asyncio
    async def test_accepts_extension_with_generic_type(self, use_case, uow):
        await use_case.execute(command(), AUDIO, "phone.m4a", "application/octet-stream")
        assert len(await pending(uow)) == 1

    @pytest.mark.asyncio
    async def test_anonymous_reader_is_marked_for_moderator(self, use_case, email):
        await use_case.execute(command(anonymous="true"), AUDIO, "coke.mp3", "audio/mpeg")
        _, subject, html = email.sent[0]
        assert "Jane Reader (anonymous)" in subject
        assert "Jane Reader (anonymous)" in html
        assert "Anonymous Reader" not in html

    @pytest.mark.asyncio
    async def test_named_reader_has_no_marker(self, use_case, email):
        await use_case.execute(command(), AUDIO, "coke.mp3", "audio/mpeg")
        _, subject, _ = email.sent[0]
        assert subject.endswith("by Jane Reader")

    @pytest.mark.asyncio
    async def test_notification_failure_does_not_fail_submission(self, use_case, uow, email):
        email.succeed = False
        result = await use_case.execute(command(), AUDIO, "coke.mp3", "audio/mpeg")
        assert result.submission_id == (await pending(uow))[0].id.value

    @pytest.mark.asyncio
    async def test_blob_is_removed_when_saving_fails(self, use_case, uow, storage, monkeypatch):
        async def broken_add(submission):
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(uow.submissions, "add", broken_add)
        with pytest.raises(RuntimeError):
            await use_case.execute(command(), AUDIO, "coke.mp3", "audio/mpeg")
        assert storage.blobs == {}
        assert len(storage.deleted) == 1
        assert uow.rollbacks == 1
