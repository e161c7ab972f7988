"""In-memory unit of work for use-case tests and local experiments.

Each unit of work owns its tables and id sequences, so two instances never
share state. Commit and rollback are no-ops apart from bookkeeping.
"""

import itertools
from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional

from ...domain.entities.favorite import Favorite
from ...domain.entities.poem import Poem
from ...domain.entities.recording import Recording
from ...domain.entities.submission import Submission
from ...domain.entities.user import User
from ...domain.enums import FavoriteKind, SubmissionStatus
from ...domain.repositories.favorite_repository import IFavoriteRepository
from ...domain.repositories.poem_repository import IPoemRepository
from ...domain.repositories.recording_repository import IRecordingRepository
from ...domain.repositories.submission_repository import ISubmissionRepository
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.repositories.user_repository import IUserRepository
from ...domain.value_objects.entity_ids import PoemId, RecordingId, SubmissionId, UserId


class InMemoryPoemRepository(IPoemRepository):

    def __init__(self):
        self.rows: Dict[int, Poem] = {}
        self._ids = itertools.count(1)

    async def list_all(self) -> List[Poem]:
        return [self.rows[key] for key in sorted(self.rows)]

    async def get_by_id(self, poem_id: PoemId) -> Optional[Poem]:
        return self.rows.get(poem_id.value)

    async def get_by_slug(self, slug: str) -> Optional[Poem]:
        return next((p for p in self.rows.values() if p.slug == slug), None)

    async def add(self, poem: Poem) -> Poem:
        stored = replace(poem, id=PoemId(next(self._ids)))
        self.rows[stored.id.value] = stored
        return stored


class InMemorySubmissionRepository(ISubmissionRepository):

    def __init__(self):
        self.rows: Dict[int, Submission] = {}
        self._ids = itertools.count(1)

    def _copy(self, submission: Submission) -> Submission:
        return replace(submission)

    async def list_by_status(self, status: SubmissionStatus) -> List[Submission]:
        rows = sorted(
            (s for s in self.rows.values() if s.status == status),
            key=lambda s: (s.submitted_at, s.id.value),
        )
        return [self._copy(s) for s in rows]

    async def get_by_id(self, submission_id: SubmissionId) -> Optional[Submission]:
        row = self.rows.get(submission_id.value)
        return self._copy(row) if row else None

    async def get_by_approval_token(self, token: str) -> Optional[Submission]:
        row = next((s for s in self.rows.values() if s.approval_token == token), None)
        return self._copy(row) if row else None

    async def add(self, submission: Submission) -> Submission:
        submission.id = SubmissionId(next(self._ids))
        self.rows[submission.id.value] = self._copy(submission)
        return submission

    async def transition_status(
        self,
        submission_id: SubmissionId,
        expected: SubmissionStatus,
        new_status: SubmissionStatus,
        reviewed_at: datetime,
    ) -> bool:
        row = self.rows.get(submission_id.value)
        if row is None or row.status != expected:
            return False
        self.rows[submission_id.value] = replace(row, status=new_status, reviewed_at=reviewed_at)
        return True

    async def count_by_status(self) -> Dict[SubmissionStatus, int]:
        counts = {status: 0 for status in SubmissionStatus}
        for row in self.rows.values():
            counts[row.status] += 1
        return counts


class InMemoryRecordingRepository(IRecordingRepository):

    def __init__(self):
        self.rows: Dict[int, Recording] = {}
        self._ids = itertools.count(1)

    def _newest_first(self, rows) -> List[Recording]:
        return sorted(rows, key=lambda r: (r.approved_at, r.id.value), reverse=True)

    async def list_all(self) -> List[Recording]:
        return self._newest_first(self.rows.values())

    async def list_by_poem(self, poem_id: PoemId) -> List[Recording]:
        return self._newest_first(r for r in self.rows.values() if r.poem_id == poem_id)

    async def get_by_id(self, recording_id: RecordingId) -> Optional[Recording]:
        return self.rows.get(recording_id.value)

    async def add(self, recording: Recording) -> Recording:
        if any(r.submission_id == recording.submission_id for r in self.rows.values()):
            raise ValueError("A recording already exists for this submission")
        recording.id = RecordingId(next(self._ids))
        self.rows[recording.id.value] = recording
        return recording

    async def delete(self, recording_id: RecordingId) -> bool:
        return self.rows.pop(recording_id.value, None) is not None

    async def count_by_poem(self) -> Dict[PoemId, int]:
        counts: Dict[PoemId, int] = {}
        for row in self.rows.values():
            counts[row.poem_id] = counts.get(row.poem_id, 0) + 1
        return counts


class InMemoryFavoriteRepository(IFavoriteRepository):

    def __init__(self, kind: FavoriteKind):
        self.kind = kind
        self.rows: List[Favorite] = []
        self._ids = itertools.count(1)

    def _target(self, target_id: Optional[int]) -> Optional[int]:
        return target_id if self.kind.has_target else None

    def _matches(self, row: Favorite, user_id: UserId, target_id: Optional[int]) -> bool:
        return row.user_id == user_id and row.target_id == self._target(target_id)

    async def list_for_user(self, user_id: UserId) -> List[Favorite]:
        rows = [row for row in self.rows if row.user_id == user_id]
        return sorted(rows, key=lambda f: (f.created_at, f.id), reverse=True)

    async def exists(self, user_id: UserId, target_id: Optional[int] = None) -> bool:
        return any(self._matches(row, user_id, target_id) for row in self.rows)

    async def add(self, user_id: UserId, target_id: Optional[int] = None) -> Favorite:
        favorite = Favorite(
            id=next(self._ids),
            kind=self.kind,
            user_id=user_id,
            target_id=self._target(target_id),
        )
        self.rows.append(favorite)
        return favorite

    async def remove(self, user_id: UserId, target_id: Optional[int] = None) -> bool:
        before = len(self.rows)
        self.rows = [row for row in self.rows if not self._matches(row, user_id, target_id)]
        return len(self.rows) < before

    async def remove_all_for_target(self, target_id: int) -> int:
        if not self.kind.has_target:
            return 0
        before = len(self.rows)
        self.rows = [row for row in self.rows if row.target_id != target_id]
        return before - len(self.rows)


class InMemoryUserRepository(IUserRepository):

    def __init__(self):
        self.rows: Dict[str, User] = {}

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        return self.rows.get(user_id.value)

    async def get_by_email(self, email: str) -> Optional[User]:
        matches = [u for u in self.rows.values() if u.email == email]
        return max(matches, key=lambda u: u.last_login or datetime.min, default=None)

    async def upsert(self, user: User) -> User:
        existing = self.rows.get(user.id.value)
        if existing:
            user = replace(user, role=existing.role, created_at=existing.created_at)
        self.rows[user.id.value] = user
        return user

    async def update(self, user: User) -> User:
        if user.id.value in self.rows:
            self.rows[user.id.value] = user
        return user


class InMemoryUnitOfWork(IUnitOfWork):

    def __init__(self):
        self.users = InMemoryUserRepository()
        self.poems = InMemoryPoemRepository()
        self.submissions = InMemorySubmissionRepository()
        self.recordings = InMemoryRecordingRepository()
        self.favorite_recordings = InMemoryFavoriteRepository(FavoriteKind.RECORDING)
        self.favorite_poems = InMemoryFavoriteRepository(FavoriteKind.POEM)
        self.favorite_poet = InMemoryFavoriteRepository(FavoriteKind.POET)
        self.commits = 0
        self.rollbacks = 0

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            await self.rollback()

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1
