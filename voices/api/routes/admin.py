"""Admin routes for moderation and catalog management"""

from typing import List

from fastapi import APIRouter, Depends

from ...api.dependencies import get_current_admin_user, get_unit_of_work, get_storage_service, get_email_service
from ...application.dtos.favorite_dtos import MessageResponse
from ...application.dtos.poem_dtos import AdminRecordingDto
from ...application.dtos.submission_dtos import AdminStatsResponse, ModerationResultResponse, PendingSubmissionDto
from ...application.use_cases.catalog_queries import AdminQueries
from ...application.use_cases.delete_recording import DeleteRecordingUseCase
from ...application.use_cases.moderate_submission import ModerateSubmissionUseCase
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import RecordingId, SubmissionId
from ...infrastructure.external_services.email_service import EmailService
from ...infrastructure.external_services.storage_service import BaseStorageService

router = APIRouter(dependencies=[Depends(get_current_admin_user)])


@router.get("/stats", response_model=AdminStatsResponse)
async def get_admin_stats(unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    """Submission counts per moderation state"""
    return await AdminQueries(unit_of_work).stats()


@router.get("/submissions/pending", response_model=List[PendingSubmissionDto])
async def get_pending_submissions(unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    """Submissions awaiting review, oldest first"""
    return await AdminQueries(unit_of_work).pending_submissions()


@router.get("/recordings", response_model=List[AdminRecordingDto])
async def get_admin_recordings(unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    """Published recordings with their poem titles"""
    return await AdminQueries(unit_of_work).recordings()


@router.post("/submissions/{submission_id}/approve", response_model=ModerationResultResponse)
async def approve_submission(
    submission_id: int,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    storage_service: BaseStorageService = Depends(get_storage_service),
    email_service: EmailService = Depends(get_email_service)
):
    use_case = ModerateSubmissionUseCase(unit_of_work, storage_service, email_service)
    return await use_case.approve(SubmissionId(submission_id))


@router.post("/submissions/{submission_id}/reject", response_model=ModerationResultResponse)
async def reject_submission(
    submission_id: int,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    storage_service: BaseStorageService = Depends(get_storage_service),
    email_service: EmailService = Depends(get_email_service)
):
    use_case = ModerateSubmissionUseCase(unit_of_work, storage_service, email_service)
    return await use_case.reject(SubmissionId(submission_id))


@router.delete("/recordings/{recording_id}", response_model=MessageResponse)
async def delete_recording(
    recording_id: int,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    storage_service: BaseStorageService = Depends(get_storage_service)
):
    """Delete a published recording and its favorites"""
    await DeleteRecordingUseCase(unit_of_work, storage_service).execute(RecordingId(recording_id))
    return MessageResponse(message="Recording deleted successfully")
