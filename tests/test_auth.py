"""Google sign-in and the current-user endpoint."""

import pytest

from scripts.make_admin import make_user_admin
from voices.application.use_cases.google_oauth_use_case import GoogleOAuthUseCase
from voices.core.security import verify_token
from voices.db.database import SessionLocal
from voices.domain.enums import UserRole
from voices.domain.exceptions import AuthenticationError
from voices.domain.value_objects.entity_ids import UserId
from voices.infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl

PROFILE = {
    "sub": "108866000000000000001",
    "email": "reader@example.com",
    "given_name": "Jane",
    "family_name": "Reader",
    "picture": "https://example.com/jane.png",
}


def verifier(token: str):
    if token != "valid-google-token":
        raise ValueError("Token signature mismatch")
    return PROFILE


class TestGoogleOAuth:

    @pytest.mark.asyncio
    async def test_first_sign_in_creates_user(self, uow):
        response = await GoogleOAuthUseCase(uow, verifier=verifier).execute("valid-google-token")

        assert response.user.id == PROFILE["sub"]
        assert response.user.role == "user"
        assert verify_token(response.tokens.access_token) == PROFILE["sub"]
        stored = await uow.users.get_by_id(UserId(PROFILE["sub"]))
        assert stored.email == "reader@example.com"
        assert stored.last_login is not None

    @pytest.mark.asyncio
    async def test_sign_in_keeps_stored_role(self, uow):
        use_case = GoogleOAuthUseCase(uow, verifier=verifier)
        await use_case.execute("valid-google-token")
        user = await uow.users.get_by_id(UserId(PROFILE["sub"]))
        user.promote_to_admin()
        await uow.users.update(user)

        response = await use_case.execute("valid-google-token")
        assert response.user.role == UserRole.ADMIN.value

    @pytest.mark.asyncio
    async def test_invalid_token(self, uow):
        with pytest.raises(AuthenticationError):
            await GoogleOAuthUseCase(uow, verifier=verifier).execute("forged")


class TestCurrentUser:

    def test_returns_profile(self, client, user_headers):
        response = client.get("/api/auth/user", headers=user_headers)
        assert response.status_code == 200
        assert response.json()["email"] == "reader@example.com"

    def test_requires_token(self, client):
        assert client.get("/api/auth/user").status_code == 401

    def test_upsert_through_sql_repository(self, client, monkeypatch):
        monkeypatch.setattr(
            "voices.application.use_cases.google_oauth_use_case.verify_google_id_token",
            verifier,
        )
        response = client.post("/api/auth/google", json={"google_token": "valid-google-token"})
        assert response.status_code == 200, response.text
        token = response.json()["tokens"]["access_token"]

        again = client.post("/api/auth/google", json={"google_token": "valid-google-token"})
        assert again.status_code == 200

        me = client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"}).json()
        assert me["id"] == PROFILE["sub"]
        assert me["firstName"] == "Jane"

    def test_new_subject_with_known_email_signs_in(self, client, monkeypatch):
        profiles = {
            "old-account": PROFILE,
            "new-account": {**PROFILE, "sub": "108866000000000000002", "given_name": "Janet"},
        }

        def shared_email_verifier(token: str):
            return profiles[token]

        monkeypatch.setattr(
            "voices.application.use_cases.google_oauth_use_case.verify_google_id_token",
            shared_email_verifier,
        )
        assert client.post("/api/auth/google", json={"google_token": "old-account"}).status_code == 200

        response = client.post("/api/auth/google", json={"google_token": "new-account"})
        assert response.status_code == 200, response.text
        assert response.json()["user"]["id"] == "108866000000000000002"


class TestMakeAdmin:

    @pytest.mark.asyncio
    async def test_promotes_signed_in_user(self, uow):
        await GoogleOAuthUseCase(uow, verifier=verifier).execute("valid-google-token")

        assert await make_user_admin(uow, "reader@example.com") is True
        user = await uow.users.get_by_id(UserId(PROFILE["sub"]))
        assert user.is_admin

    @pytest.mark.asyncio
    async def test_unknown_email(self, uow):
        assert await make_user_admin(uow, "nobody@example.com") is False

    @pytest.mark.asyncio
    async def test_promotes_through_sql_repository(self, client, user_headers):
        session = SessionLocal()
        try:
            assert await make_user_admin(UnitOfWorkImpl(session), "reader@example.com") is True
        finally:
            session.close()

        me = client.get("/api/auth/user", headers=user_headers).json()
        assert me["role"] == "admin"
