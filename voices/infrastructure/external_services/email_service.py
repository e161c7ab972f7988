"""Email service for moderation notifications and reader confirmations"""

import smtplib
import asyncio
import logging
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from html import escape
from typing import Optional

from ...core.config import settings

logger = logging.getLogger(__name__)


class EmailService:

    def __init__(self):
        self.enabled = settings.EMAIL_ENABLED
        self.smtp_host = settings.SMTP_HOST
        self.smtp_port = settings.SMTP_PORT
        self.smtp_username = settings.SMTP_USERNAME
        self.smtp_password = settings.SMTP_PASSWORD
        self.smtp_use_tls = settings.SMTP_USE_TLS
        self.timeout = settings.EMAIL_TIMEOUT_SECONDS
        self.from_email = settings.FROM_EMAIL
        self.from_name = settings.FROM_NAME
        self.moderator_email = settings.MODERATOR_EMAIL
        self.frontend_url = settings.FRONTEND_URL
        self.backend_url = settings.BACKEND_URL.rstrip("/")
        self.api_prefix = settings.API_PREFIX

    async def send_email(self,
                         to_email: str,
                         subject: str,
                         html_content: str,
                         text_content: str = None) -> bool:
        """Send email with HTML content; reports failure instead of raising"""
        if not self.enabled:
            logger.info(f"Email disabled, skipping '{subject}' to {to_email}")
            return False

        try:
            msg = MIMEMultipart('alternative')
            msg['Subject'] = subject
            msg['From'] = f"{self.from_name} <{self.from_email}>"
            msg['To'] = to_email

            if text_content:
                msg.attach(MIMEText(text_content, 'plain'))
            msg.attach(MIMEText(html_content, 'html'))

            await asyncio.wait_for(self._send_smtp_email(msg), self.timeout)

            logger.info(f"Email sent to {to_email}: {subject}")
            return True

        except asyncio.TimeoutError:
            logger.error(f"Timed out sending email to {to_email}: {subject}")
            return False
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Error sending email to {to_email}: {e}")
            return False

    async def _send_smtp_email(self, msg: MIMEMultipart):
        """Send email via SMTP"""
        def send_sync():
            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=self.timeout) as server:
                if self.smtp_use_tls:
                    server.starttls()
                if self.smtp_username:
                    server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg)

        # Run in thread pool to avoid blocking
        loop = asyncio.get_event_loop()
        await loop.run_in_executor(None, send_sync)

    def moderation_link(self, action: str, token: str) -> str:
        return f"{self.backend_url}{self.api_prefix}/admin/{action}/{token}"

    async def send_submission_notification(self,
                                           submission_id: int,
                                           reader_name: str,
                                           poem_title: str,
                                           email: str,
                                           audio_url: str,
                                           approval_token: str,
                                           location: Optional[str] = None,
                                           background: Optional[str] = None,
                                           interpretation_note: Optional[str] = None,
                                           anonymous: bool = False) -> bool:
        """Tell the moderator about a new submission, with one-click links"""
        if anonymous:
            reader_name = f"{reader_name} (anonymous)"
        approve_url = self.moderation_link("approve", approval_token)
        reject_url = self.moderation_link("reject", approval_token)

        details = [
            f"<li><strong>Reader:</strong> {escape(reader_name)}</li>",
            f"<li><strong>Email:</strong> {escape(email)}</li>",
        ]
        if location:
            details.append(f"<li><strong>Location:</strong> {escape(location)}</li>")
        if background:
            details.append(f"<li><strong>Background:</strong> {escape(background)}</li>")
        details.append(f"<li><strong>Submission:</strong> #{submission_id}</li>")

        note = ""
        if interpretation_note:
            note = f"""
                <h3>Reader's Note:</h3>
                <p style="font-style: italic;">"{escape(interpretation_note)}"</p>
            """

        html_content = f"""
        <!DOCTYPE html>
        <html>
        <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #2C3E50;">
            <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
                <h1>New Poetry Recording Submission</h1>
                <h2>{escape(poem_title)}</h2>
                <p>Read by {escape(reader_name)}</p>
                <ul>{''.join(details)}</ul>
                {note}
                <p><a href="{escape(audio_url)}">Listen to Recording</a></p>
                <p>
                    <a href="{approve_url}" style="background: #16a34a; color: white; padding: 10px 24px; text-decoration: none; border-radius: 6px;">Approve</a>
                    &nbsp;
                    <a href="{reject_url}" style="background: #dc2626; color: white; padding: 10px 24px; text-decoration: none; border-radius: 6px;">Reject</a>
                </p>
                <p style="color: #8B9DC3; font-size: 14px;">{escape(self.from_name)}</p>
            </div>
        </body>
        </html>
        """

        text_content = f"""
New submission #{submission_id}: {poem_title} read by {reader_name} ({email})

Listen: {audio_url}
Approve: {approve_url}
Reject: {reject_url}
        """

        return await self.send_email(
            self.moderator_email,
            f"New Poetry Submission: {poem_title} by {reader_name}",
            html_content,
            text_content,
        )

    async def send_approval_confirmation(self, to_email: str, reader_name: str, poem_title: str) -> bool:
        """Let the reader know their recording is live"""
        html_content = f"""
        <!DOCTYPE html>
        <html>
        <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #2C3E50;">
            <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
                <h1>Your Recording Has Been Approved!</h1>
                <p>Dear {escape(reader_name)},</p>
                <p>Your reading of "<strong>{escape(poem_title)}</strong>" has been approved and is now live.</p>
                <p><a href="{self.frontend_url}">View Your Recording</a></p>
                <p>Thank you for lending your voice to Frank O'Hara's poetry.</p>
                <p style="color: #8B9DC3; font-size: 14px;">{escape(self.from_name)}</p>
            </div>
        </body>
        </html>
        """

        text_content = f"""
Dear {reader_name},

Your reading of "{poem_title}" has been approved and is now live: {self.frontend_url}
        """

        return await self.send_email(
            to_email,
            f"Your poetry reading has been approved - {poem_title}",
            html_content,
            text_content,
        )
