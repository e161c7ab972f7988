"""One-click moderation links embedded in the moderator's notification email.

The token in the URL is the credential, so these routes take no session.
They answer with small HTML pages because they are opened from a mail client.
"""

import logging
from html import escape

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from ...api.dependencies import get_unit_of_work, get_storage_service, get_email_service
from ...application.use_cases.moderate_submission import ModerateSubmissionUseCase
from ...core.config import settings
from ...domain.exceptions import AlreadyProcessedError, NotFoundError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.email_service import EmailService
from ...infrastructure.external_services.storage_service import BaseStorageService

logger = logging.getLogger(__name__)

router = APIRouter()


def render_page(title: str, body: str, color: str, status_code: int = 200, link: bool = False) -> HTMLResponse:
    visit = ""
    if link:
        visit = (
            f'<a href="{escape(settings.FRONTEND_URL)}" style="background-color: #4A90E2; color: white; '
            'padding: 12px 24px; text-decoration: none; border-radius: 8px; display: inline-block; '
            'margin-top: 20px;">Visit Website</a>'
        )
    content = f"""
    <html>
      <head><title>{escape(title)}</title></head>
      <body style="font-family: Inter, sans-serif; max-width: 600px; margin: 50px auto; padding: 20px; text-align: center;">
        <h1 style="color: {color};">{escape(title)}</h1>
        <p>{escape(body)}</p>
        {visit}
      </body>
    </html>
    """
    return HTMLResponse(content=content, status_code=status_code)


async def _moderate(action: str, token: str, use_case: ModerateSubmissionUseCase) -> HTMLResponse:
    try:
        if action == "approve":
            await use_case.approve_by_token(token)
        else:
            await use_case.reject_by_token(token)
    except NotFoundError:
        return render_page(
            "Submission Not Found",
            "The submission token is invalid.",
            "#dc3545",
            status_code=404,
        )
    except AlreadyProcessedError as e:
        return render_page("Already Processed", e.message, "#ffc107", status_code=409)
    except Exception:
        logger.exception(f"Failed to {action} submission from email link")
        return render_page(
            "Error",
            f"An error occurred while processing the {'approval' if action == 'approve' else 'rejection'}.",
            "#dc3545",
            status_code=500,
        )

    if action == "approve":
        return render_page(
            "Submission Approved",
            "The recording has been approved and is now live on the website.",
            "#28a745",
            link=True,
        )
    return render_page(
        "Submission Rejected",
        "The recording has been rejected and removed from the system.",
        "#dc3545",
        link=True,
    )


@router.get("/approve/{token}", response_class=HTMLResponse)
async def approve_from_email(
    token: str,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    storage_service: BaseStorageService = Depends(get_storage_service),
    email_service: EmailService = Depends(get_email_service)
):
    use_case = ModerateSubmissionUseCase(unit_of_work, storage_service, email_service)
    return await _moderate("approve", token, use_case)


@router.get("/reject/{token}", response_class=HTMLResponse)
async def reject_from_email(
    token: str,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    storage_service: BaseStorageService = Depends(get_storage_service),
    email_service: EmailService = Depends(get_email_service)
):
    use_case = ModerateSubmissionUseCase(unit_of_work, storage_service, email_service)
    return await _moderate("reject", token, use_case)
