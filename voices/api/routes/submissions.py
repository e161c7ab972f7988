"""Recording submission route"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from ...api.dependencies import get_unit_of_work, get_storage_service, get_email_service
from ...application.dtos.submission_dtos import SubmissionCommand, SubmissionCreatedResponse
from ...application.use_cases.submit_recording import SubmitRecordingUseCase
from ...core.config import settings
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.email_service import EmailService
from ...infrastructure.external_services.storage_service import BaseStorageService

router = APIRouter()


@router.post("", response_model=SubmissionCreatedResponse)
async def create_submission(
    audio_file: Optional[UploadFile] = File(None, alias="audioFile"),
    reader_name: Optional[str] = Form(None, alias="readerName"),
    email: Optional[str] = Form(None),
    poem_slug: Optional[str] = Form(None, alias="poemSlug"),
    location: Optional[str] = Form(None),
    background: Optional[str] = Form(None),
    interpretation_note: Optional[str] = Form(None, alias="interpretationNote"),
    anonymous: Optional[str] = Form(None),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    storage_service: BaseStorageService = Depends(get_storage_service),
    email_service: EmailService = Depends(get_email_service)
):
    """Submit a reading for moderation"""
    command = SubmissionCommand.from_form({
        "readerName": reader_name,
        "email": email,
        "poemSlug": poem_slug,
        "location": location,
        "background": background,
        "interpretationNote": interpretation_note,
        "anonymous": anonymous,
    })

    file_data = None
    filename = None
    content_type = None
    if audio_file is not None:
        # One byte past the limit is enough to detect an oversized upload
        file_data = await audio_file.read(settings.MAX_UPLOAD_SIZE_BYTES + 1)
        filename = audio_file.filename
        content_type = audio_file.content_type

    use_case = SubmitRecordingUseCase(unit_of_work, storage_service, email_service)
    return await use_case.execute(command, file_data, filename, content_type)
