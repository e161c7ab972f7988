"""Moderation state machine against the in-memory and SQLAlchemy units of work."""

from dataclasses import replace

import pytest

from voices.db.database import SessionLocal
from voices.infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl

from voices.application.dtos.submission_dtos import SubmissionCommand
from voices.application.use_cases.moderate_submission import ModerateSubmissionUseCase
from voices.application.use_cases.submit_recording import SubmitRecordingUseCase
from voices.domain.enums import SubmissionStatus
from voices.domain.exceptions import AlreadyProcessedError, NotFoundError
from voices.domain.value_objects.entity_ids import SubmissionId


async def submit(uow, storage, email, anonymous: bool = False):
    command = SubmissionCommand.from_form({
        "readerName": "Frank Reader",
        "email": "frank@example.com",
        "poemSlug": "ave-maria",
        "anonymous": "true" if anonymous else "false",
    })
    result = await SubmitRecordingUseCase(uow, storage, email).execute(command, b"RIFF" * 64, "ave.wav", "audio/wav")
    email.sent.clear()
    return await uow.submissions.get_by_id(SubmissionId(result.submission_id))


@pytest.fixture
def moderation(uow, storage, email):
    return ModerateSubmissionUseCase(uow, storage, email)


class TestApprove:

    @pytest.mark.asyncio
    async def test_publishes_recording_and_confirms(self, moderation, uow, storage, email):
        submission = await submit(uow, storage, email)

        result = await moderation.approve(submission.id)

        stored = await uow.submissions.get_by_id(submission.id)
        assert stored.status == SubmissionStatus.APPROVED
        assert stored.reviewed_at is not None

        recordings = await uow.recordings.list_all()
        assert len(recordings) == 1
        assert recordings[0].id.value == result.recording_id
        assert recordings[0].reader_name == "Frank Reader"
        assert recordings[0].file.storage_key == submission.file.storage_key
        assert recordings[0].file.storage_key in storage.blobs

        to_email, subject, _ = email.sent[0]
        assert to_email == "frank@example.com"
        assert "Ave Maria" in subject

    @pytest.mark.asyncio
    async def test_anonymous_reader_recording_uses_placeholder(self, moderation, uow, storage, email):
        submission = await submit(uow, storage, email, anonymous=True)
        await moderation.approve(submission.id)
        recording = (await uow.recordings.list_all())[0]
        assert recording.reader_name == "Anonymous Reader"

    @pytest.mark.asyncio
    async def test_second_approval_is_refused(self, moderation, uow, storage, email):
        submission = await submit(uow, storage, email)
        await moderation.approve(submission.id)

        with pytest.raises(AlreadyProcessedError):
            await moderation.approve(submission.id)
        assert len(await uow.recordings.list_all()) == 1

    @pytest.mark.asyncio
    async def test_concurrent_approval_loses_the_race(self, moderation, uow, storage, email, monkeypatch):
        submission = await submit(uow, storage, email)
        stale = replace(submission)
        await moderation.approve(submission.id)

        # The second reviewer read the row before the first one committed
        async def stale_read(submission_id):
            return replace(stale)

        monkeypatch.setattr(uow.submissions, "get_by_id", stale_read)
        with pytest.raises(AlreadyProcessedError):
            await moderation.approve(submission.id)
        assert len(await uow.recordings.list_all()) == 1

    @pytest.mark.asyncio
    async def test_confirmation_failure_is_not_fatal(self, moderation, uow, storage, email):
        submission = await submit(uow, storage, email)
        email.succeed = False
        result = await moderation.approve(submission.id)
        assert result.status == "approved"

    @pytest.mark.asyncio
    async def test_unknown_submission(self, moderation):
        with pytest.raises(NotFoundError):
            await moderation.approve(SubmissionId(999))


class TestReject:

    @pytest.mark.asyncio
    async def test_rejects_and_deletes_blob(self, moderation, uow, storage, email):
        submission = await submit(uow, storage, email)

        await moderation.reject(submission.id)

        stored = await uow.submissions.get_by_id(submission.id)
        assert stored.status == SubmissionStatus.REJECTED
        assert storage.deleted == [submission.file.storage_key]
        assert await uow.recordings.list_all() == []
        assert email.sent == []

    @pytest.mark.asyncio
    async def test_reject_after_approve_is_refused(self, moderation, uow, storage, email):
        submission = await submit(uow, storage, email)
        await moderation.approve(submission.id)

        with pytest.raises(AlreadyProcessedError):
            await moderation.reject(submission.id)
        assert storage.deleted == []
        assert len(await uow.recordings.list_all()) == 1

    @pytest.mark.asyncio
    async def test_second_rejection_is_refused(self, moderation, uow, storage, email):
        submission = await submit(uow, storage, email)
        await moderation.reject(submission.id)

        with pytest.raises(AlreadyProcessedError):
            await moderation.reject(submission.id)
        assert storage.deleted == [submission.file.storage_key]

    @pytest.mark.asyncio
    async def test_blob_delete_failure_keeps_rejection(self, moderation, uow, storage, email):
        submission = await submit(uow, storage, email)
        storage.fail_delete = True

        await moderation.reject(submission.id)

        stored = await uow.submissions.get_by_id(submission.id)
        assert stored.status == SubmissionStatus.REJECTED


class TestTokenEntryPoints:

    @pytest.mark.asyncio
    async def test_token_approval_uses_same_rules(self, moderation, uow, storage, email):
        submission = await submit(uow, storage, email)

        await moderation.approve_by_token(submission.approval_token)
        with pytest.raises(AlreadyProcessedError):
            await moderation.reject_by_token(submission.approval_token)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["", "no-such-token"])
    async def test_unknown_token(self, moderation, token):
        with pytest.raises(NotFoundError):
            await moderation.approve_by_token(token)


class TestConditionalUpdate:
    """Two reviewers with their own sessions racing on the same row"""

    @pytest.fixture
    def sessions(self, setup_database):
        opened = []

        def open_uow():
            session = SessionLocal()
            opened.append(session)
            return UnitOfWorkImpl(session)

        yield open_uow
        for session in opened:
            session.close()

    @pytest.mark.asyncio
    async def test_stale_reject_after_approval_is_refused(self, sessions, storage, email, monkeypatch):
        submission = await submit(sessions(), storage, email)
        first, second = sessions(), sessions()
        stale = await second.submissions.get_by_id(submission.id)

        await ModerateSubmissionUseCase(first, storage, email).approve(submission.id)

        async def stale_read(submission_id):
            return replace(stale)

        monkeypatch.setattr(second.submissions, "get_by_id", stale_read)
        with pytest.raises(AlreadyProcessedError):
            await ModerateSubmissionUseCase(second, storage, email).reject(submission.id)

        check = sessions()
        assert len(await check.recordings.list_all()) == 1
        stored = await check.submissions.get_by_id(submission.id)
        assert stored.status == SubmissionStatus.APPROVED
        assert storage.deleted == []

    @pytest.mark.asyncio
    async def test_stale_approval_after_rejection_publishes_nothing(self, sessions, storage, email, monkeypatch):
        submission = await submit(sessions(), storage, email)
        first, second = sessions(), sessions()
        stale = await second.submissions.get_by_id(submission.id)

        await ModerateSubmissionUseCase(first, storage, email).reject(submission.id)

        async def stale_read(submission_id):
            return replace(stale)

        monkeypatch.setattr(second.submissions, "get_by_id", stale_read)
        with pytest.raises(AlreadyProcessedError):
            await ModerateSubmissionUseCase(second, storage, email).approve(submission.id)

        check = sessions()
        assert await check.recordings.list_all() == []
        assert storage.deleted == [submission.file.storage_key]
        assert email.sent == []
