"""Read-side use cases for the public catalog and the moderator dashboard"""

from typing import Dict, List

from ...domain.enums import SubmissionStatus
from ...domain.exceptions import NotFoundError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.poem_dtos import AdminRecordingDto, PoemDetailResponse, PoemDto, RecordingDto
from ..dtos.submission_dtos import AdminStatsResponse, PendingSubmissionDto


class CatalogQueries:
    """Public read API"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def list_poems(self) -> List[PoemDto]:
        async with self.unit_of_work:
            return [PoemDto.from_entity(p) for p in await self.unit_of_work.poems.list_all()]

    async def recording_counts(self) -> Dict[str, int]:
        """Approved recording count per poem slug; poems without recordings report 0"""
        async with self.unit_of_work:
            poems = await self.unit_of_work.poems.list_all()
            counts = await self.unit_of_work.recordings.count_by_poem()
            return {poem.slug: counts.get(poem.id, 0) for poem in poems}

    async def poem_detail(self, slug: str) -> PoemDetailResponse:
        async with self.unit_of_work:
            poem = await self.unit_of_work.poems.get_by_slug(slug)
            if poem is None:
                raise NotFoundError(f"Poem '{slug}' not found")
            recordings = await self.unit_of_work.recordings.list_by_poem(poem.id)
            return PoemDetailResponse(
                poem=PoemDto.from_entity(poem),
                recordings=[RecordingDto.from_entity(r) for r in recordings],
            )

    async def list_recordings(self) -> List[RecordingDto]:
        async with self.unit_of_work:
            return [RecordingDto.from_entity(r) for r in await self.unit_of_work.recordings.list_all()]


class AdminQueries:
    """Moderator dashboard reads"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def stats(self) -> AdminStatsResponse:
        async with self.unit_of_work:
            counts = await self.unit_of_work.submissions.count_by_status()
        return AdminStatsResponse(
            pending=counts.get(SubmissionStatus.PENDING, 0),
            approved=counts.get(SubmissionStatus.APPROVED, 0),
            rejected=counts.get(SubmissionStatus.REJECTED, 0),
            total=sum(counts.values()),
        )

    async def pending_submissions(self) -> List[PendingSubmissionDto]:
        async with self.unit_of_work:
            titles = await self._poem_titles()
            submissions = await self.unit_of_work.submissions.list_by_status(SubmissionStatus.PENDING)
            return [
                PendingSubmissionDto.from_entity(s, titles.get(s.poem_id.value, "Unknown Poem"))
                for s in submissions
            ]

    async def recordings(self) -> List[AdminRecordingDto]:
        async with self.unit_of_work:
            titles = await self._poem_titles()
            recordings = await self.unit_of_work.recordings.list_all()
            return [
                AdminRecordingDto(
                    **RecordingDto.from_entity(r).model_dump(),
                    poem_title=titles.get(r.poem_id.value, "Unknown Poem"),
                )
                for r in recordings
            ]

    async def _poem_titles(self) -> Dict[int, str]:
        return {p.id.value: p.title for p in await self.unit_of_work.poems.list_all()}
