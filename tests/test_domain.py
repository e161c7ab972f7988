"""Entity rules, upload checks and form parsing."""

import pytest

from voices.application.dtos.submission_dtos import SubmissionCommand
from voices.domain.entities.favorite import Favorite
from voices.domain.entities.recording import Recording
from voices.domain.entities.submission import Submission
from voices.domain.enums import FavoriteKind, SubmissionStatus
from voices.domain.events.submission_events import SubmissionApproved, SubmissionReceived
from voices.domain.exceptions import AlreadyProcessedError, ValidationError
from voices.domain.value_objects.audio_file import AudioFile, is_allowed_audio
from voices.domain.value_objects.entity_ids import PoemId, SubmissionId, UserId

ALLOWED_MIME = ["audio/mpeg", "audio/mp3", "audio/wav", "audio/x-wav", "audio/wave", "audio/mp4", "audio/m4a", "audio/x-m4a"]
ALLOWED_EXT = [".mp3", ".wav", ".m4a"]


def make_submission(anonymous: bool = False) -> Submission:
    submission = Submission.create(
        poem_id=PoemId(1),
        reader_name="Jane Reader",
        email="jane@example.com",
        file=AudioFile(storage_key="1700000000000-abcd1234.mp3", original_name="coke.mp3", size=2048, mime_type="audio/mpeg"),
        approval_token="token-1",
        location="Brooklyn",
        anonymous=anonymous,
    )
    submission.id = SubmissionId(7)
    return submission


class TestSubmission:

    def test_create_starts_pending_and_emits_event(self):
        submission = make_submission()
        assert submission.status == SubmissionStatus.PENDING
        events = submission.get_events()
        assert isinstance(events[0], SubmissionReceived)
        assert submission.get_events() == []

    def test_approve_sets_status_and_review_time(self):
        submission = make_submission()
        submission.approve()
        assert submission.status == SubmissionStatus.APPROVED
        assert submission.reviewed_at is not None
        assert any(isinstance(e, SubmissionApproved) for e in submission.get_events())

    @pytest.mark.parametrize("first", ["approve", "reject"])
    @pytest.mark.parametrize("second", ["approve", "reject"])
    def test_terminal_states_refuse_transitions(self, first, second):
        submission = make_submission()
        getattr(submission, first)()
        with pytest.raises(AlreadyProcessedError):
            getattr(submission, second)()

    def test_status_terminality(self):
        assert not SubmissionStatus.PENDING.is_terminal
        assert SubmissionStatus.APPROVED.is_terminal
        assert SubmissionStatus.REJECTED.is_terminal


class TestRecordingSnapshot:

    def test_copies_reader_and_file_metadata(self):
        submission = make_submission()
        submission.approve()
        recording = Recording.from_submission(submission, anonymous_name="Anonymous Reader")
        assert recording.reader_name == "Jane Reader"
        assert recording.location == "Brooklyn"
        assert recording.file == submission.file
        assert recording.submission_id == submission.id
        assert recording.approved_at == submission.reviewed_at

    def test_anonymous_reader_name_is_replaced(self):
        submission = make_submission(anonymous=True)
        submission.approve()
        recording = Recording.from_submission(submission, anonymous_name="Anonymous Reader")
        assert recording.reader_name == "Anonymous Reader"
        assert recording.anonymous is True

    def test_unsaved_submission_cannot_be_published(self):
        submission = make_submission()
        submission.id = None
        with pytest.raises(ValueError):
            Recording.from_submission(submission, anonymous_name="Anonymous Reader")


class TestFavorite:

    def test_poet_favorite_has_no_target(self):
        with pytest.raises(ValueError):
            Favorite(id=None, kind=FavoriteKind.POET, user_id=UserId("u1"), target_id=3)

    def test_recording_favorite_needs_target(self):
        with pytest.raises(ValueError):
            Favorite(id=None, kind=FavoriteKind.RECORDING, user_id=UserId("u1"))


class TestAudioAllowList:

    @pytest.mark.parametrize("filename,content_type", [
        ("reading.mp3", "audio/mpeg"),
        ("reading.bin", "audio/wav"),
        ("reading.m4a", "application/octet-stream"),
        ("reading.wav", ""),
        ("reading.mp3", None),
        ("reading.mp3", "audio/x-mp3"),
        ("READING.MP3", "application/octet-stream"),
        ("coke.mp3", "video/mpeg"),
        ("coke.mp3", "binary/octet-stream"),
        ("coke.mp3", "application/x-unknown"),
    ])
    def test_accepted(self, filename, content_type):
        assert is_allowed_audio(filename, content_type, ALLOWED_MIME, ALLOWED_EXT)

    @pytest.mark.parametrize("filename,content_type", [
        ("notes.txt", "text/plain"),
        ("reading.mp3", "text/plain"),
        ("reading.wav", "text/html"),
        ("reading.ogg", "application/octet-stream"),
        ("clip.mp4", "video/mp4"),
        ("reading", "application/octet-stream"),
    ])
    def test_rejected(self, filename, content_type):
        assert not is_allowed_audio(filename, content_type, ALLOWED_MIME, ALLOWED_EXT)


class TestSubmissionCommand:

    def test_parses_form_strings(self):
        command = SubmissionCommand.from_form({
            "readerName": "  Jane ",
            "email": "jane@example.com",
            "poemSlug": "ave-maria",
            "location": "",
            "background": "   ",
            "interpretationNote": "Read at dusk",
            "anonymous": "true",
        })
        assert command.reader_name == "Jane"
        assert command.location is None
        assert command.background is None
        assert command.interpretation_note == "Read at dusk"
        assert command.anonymous is True

    @pytest.mark.parametrize("raw,expected", [("false", False), ("", False), (None, False), ("on", True), ("1", True)])
    def test_anonymous_flag(self, raw, expected):
        command = SubmissionCommand.from_form({
            "readerName": "Jane", "email": "jane@example.com", "poemSlug": "ave-maria", "anonymous": raw,
        })
        assert command.anonymous is expected

    def test_reports_each_invalid_field(self):
        with pytest.raises(ValidationError) as exc_info:
            SubmissionCommand.from_form({"readerName": "", "email": "not-an-email", "poemSlug": None})
        fields = {error["field"] for error in exc_info.value.errors}
        assert fields == {"readerName", "email", "poemSlug"}
        assert exc_info.value.status_code == 400
