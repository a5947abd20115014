"""
Shared pytest fixtures for accounts backend tests.
"""
import copy
import os
import uuid
from typing import Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from jobportal_accounts.domain.exceptions import ConflictError, UploadError
from jobportal_accounts.domain.models.media import MediaFile, UploadResult
from jobportal_accounts.domain.models.user import User
from jobportal_accounts.domain.repositories.user_repository import UserRepository
from jobportal_accounts.domain.services.media_uploader import MediaUploader


class InMemoryUserRepository(UserRepository):
    """UserRepository backed by a dict; enforces email uniqueness like the unique index."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return copy.deepcopy(user)
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self.users.get(user_id)
        return copy.deepcopy(user) if user else None

    async def save(self, user: User) -> User:
        for other in self.users.values():
            if other.email == user.email and other.id != user.id:
                raise ConflictError()
        stored = copy.deepcopy(user)
        if not stored.id:
            stored.id = uuid.uuid4().hex[:24]
        self.users[stored.id] = stored
        return copy.deepcopy(stored)


class FakeMediaUploader(MediaUploader):
    """Records uploads and answers with a Cloudinary-shaped URL, or fails on demand."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: List[dict] = []

    async def upload(
        self,
        file: MediaFile,
        resource_type: str = "image",
        folder: Optional[str] = None,
        access_mode: Optional[str] = None,
    ) -> UploadResult:
        self.calls.append(
            {"file": file, "resource_type": resource_type, "folder": folder, "access_mode": access_mode}
        )
        if self.fail:
            raise UploadError()
        path = f"{folder}/{file.filename}" if folder else file.filename
        return UploadResult(
            secure_url=f"https://res.cloudinary.com/demo/{resource_type}/upload/v1/{path}",
            public_id=path,
            resource_type=resource_type,
        )


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_jobportal",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "BCRYPT_ROUNDS": "4",
        "CLOUDINARY_CLOUD_NAME": "demo",
        "CLOUDINARY_API_KEY": "123456",
        "CLOUDINARY_API_SECRET": "shhh",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.session_max_age_seconds = 86400
    mock.bcrypt_rounds = 4
    mock.session_cookie_name = "token"
    mock.session_cookie_secure = False
    mock.cloudinary_cloud_name = "demo"
    mock.cloudinary_api_key = "123456"
    mock.cloudinary_api_secret = "shhh"
    mock.cloudinary_api_base_url = "https://api.cloudinary.com"
    mock.resume_upload_folder = "resumes"
    mock.cors_origins = ["http://localhost:5173"]
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("jobportal_accounts.core.config.get_settings", return_value=mock), patch(
        "jobportal_accounts.core.security.get_settings", return_value=mock
    ), patch("jobportal_accounts.api.v1.cookies.get_settings", return_value=mock), patch(
        "jobportal_accounts.api.v1.dependencies.get_settings", return_value=mock
    ), patch(
        "jobportal_accounts.infrastructure.external.cloudinary_client.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def media_uploader():
    return FakeMediaUploader()


@pytest.fixture
def failing_media_uploader():
    return FakeMediaUploader(fail=True)
