"""Test configuration and fixtures."""

import os
import tempfile

# Set environment variables before importing application code
os.environ["TESTING"] = "true"
os.environ["EMAIL_ENABLED"] = "false"
os.environ["STORAGE_BACKEND"] = "local"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="voices-test-uploads-")

from typing import Dict, List, Optional, Tuple

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from voices.main import app
from voices.api.dependencies import get_email_service, get_storage_service
from voices.core.security import create_access_token
from voices.db.database import SessionLocal, engine
from voices.db.models import Base
from voices.db.seed import INITIAL_POEMS, seed_poems
from voices.domain.entities.poem import Poem
from voices.domain.enums import UserRole
from voices.infrastructure.external_services.email_service import EmailService
from voices.infrastructure.external_services.storage_service import BaseStorageService
from voices.infrastructure.orm.user_model import UserModel
from voices.infrastructure.repositories.in_memory import InMemoryUnitOfWork


class FakeStorageService(BaseStorageService):
    """Keeps blobs in a dict; ``fail_delete`` simulates an unreachable backend"""

    def __init__(self):
        super().__init__(timeout=5)
        self.blobs: Dict[str, bytes] = {}
        self.deleted: List[str] = []
        self.fail_delete = False

    def public_url(self, key: str) -> str:
        return f"http://testserver/uploads/{key}"

    def _put(self, key: str, data: bytes, content_type: str) -> None:
        self.blobs[key] = data

    def _remove(self, key: str) -> None:
        if self.fail_delete:
            raise OSError("storage unavailable")
        self.blobs.pop(key, None)
        self.deleted.append(key)


class FakeEmailService(EmailService):
    """Records outgoing mail instead of talking to SMTP"""

    def __init__(self):
        super().__init__()
        self.sent: List[Tuple[str, str, str]] = []
        self.succeed = True

    async def send_email(self, to_email: str, subject: str, html_content: str, text_content: Optional[str] = None) -> bool:
        self.sent.append((to_email, subject, html_content))
        return self.succeed


@pytest.fixture
def storage() -> FakeStorageService:
    return FakeStorageService()


@pytest.fixture
def email() -> FakeEmailService:
    return FakeEmailService()


@pytest.fixture
def setup_database():
    """Fresh tables and catalog poems for every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_poems(db)
    finally:
        db.close()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(setup_database, storage, email) -> TestClient:
    app.dependency_overrides[get_storage_service] = lambda: storage
    app.dependency_overrides[get_email_service] = lambda: email
    yield TestClient(app)
    app.dependency_overrides.clear()


def _create_user(user_id: str, email: str, role: UserRole) -> Dict[str, str]:
    db = SessionLocal()
    try:
        db.add(UserModel(id=user_id, email=email, first_name="Test", role=role))
        db.commit()
    finally:
        db.close()
    return {"Authorization": f"Bearer {create_access_token(user_id, role=role.value)}"}


@pytest.fixture
def user_headers(setup_database) -> Dict[str, str]:
    return _create_user("google-reader-1", "reader@example.com", UserRole.USER)


@pytest.fixture
def admin_headers(setup_database) -> Dict[str, str]:
    return _create_user("google-admin-1", "moderator@example.com", UserRole.ADMIN)


@pytest_asyncio.fixture
async def uow() -> InMemoryUnitOfWork:
    """In-memory unit of work with the catalog poems loaded."""
    unit_of_work = InMemoryUnitOfWork()
    for poem in INITIAL_POEMS:
        await unit_of_work.poems.add(Poem(id=None, **poem))
    return unit_of_work
