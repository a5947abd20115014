"""
Unit tests for auth use cases (Register, Login, GetCurrentUser).
"""
import pytest
from jobportal_accounts.core.security import create_jwt_token, hash_password, verify_password
from jobportal_accounts.application.use_cases.auth.login_user import LoginUserUseCase
from jobportal_accounts.application.use_cases.auth.register_user import RegisterUserUseCase
from jobportal_accounts.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from jobportal_accounts.application.dto.auth_dto import UserLoginRequest, UserRegistrationRequest, LoginResult
from jobportal_accounts.domain.exceptions import (
    AuthError,
    ConflictError,
    NotAuthenticatedError,
    UploadError,
    ValidationError,
)
from jobportal_accounts.domain.models.media import MediaFile
from jobportal_accounts.domain.models.user import User, UserRole


def _registration(**overrides) -> UserRegistrationRequest:
    fields = {
        "fullname": "Asha Rao",
        "email": "asha@example.com",
        "phone_number": "9876543210",
        "password": "s3cret-pass",
        "role": "student",
    }
    fields.update(overrides)
    return UserRegistrationRequest(**fields)


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase"""

    @pytest.mark.asyncio
    async def test_register_success(self, user_repo, media_uploader, mock_settings):
        use_case = RegisterUserUseCase(user_repo, media_uploader)
        result = await use_case.execute(_registration())

        assert result.id
        assert result.fullname == "Asha Rao"
        assert result.email == "asha@example.com"
        assert result.role == UserRole.STUDENT
        assert "password" not in result.model_dump()
        assert media_uploader.calls == []

        stored = user_repo.users[result.id]
        assert stored.profile.profile_photo == ""

    @pytest.mark.asyncio
    async def test_stored_password_is_a_verifiable_hash(self, user_repo, media_uploader, mock_settings):
        use_case = RegisterUserUseCase(user_repo, media_uploader)
        result = await use_case.execute(_registration(password="plain-text-pw"))

        stored = user_repo.users[result.id]
        assert stored.hashed_password != "plain-text-pw"
        assert verify_password("plain-text-pw", stored.hashed_password) is True

    @pytest.mark.asyncio
    async def test_register_duplicate_email_raises_conflict(self, user_repo, media_uploader, mock_settings):
        use_case = RegisterUserUseCase(user_repo, media_uploader)
        await use_case.execute(_registration())

        with pytest.raises(ConflictError, match="already exists"):
            await use_case.execute(_registration(fullname="Someone Else"))
        assert len(user_repo.users) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["fullname", "email", "phone_number", "password", "role"])
    async def test_register_missing_field_raises_validation(
        self, user_repo, media_uploader, mock_settings, missing
    ):
        use_case = RegisterUserUseCase(user_repo, media_uploader)
        with pytest.raises(ValidationError, match="All fields are required"):
            await use_case.execute(_registration(**{missing: None}))
        assert user_repo.users == {}

    @pytest.mark.asyncio
    async def test_register_unknown_role_raises_validation(self, user_repo, media_uploader, mock_settings):
        use_case = RegisterUserUseCase(user_repo, media_uploader)
        with pytest.raises(ValidationError, match="Invalid role"):
            await use_case.execute(_registration(role="admin"))
        assert user_repo.users == {}

    @pytest.mark.asyncio
    async def test_register_with_photo_stores_uploaded_url(self, user_repo, media_uploader, mock_settings):
        photo = MediaFile(filename="me.png", content=b"\x89PNG", content_type="image/png")
        use_case = RegisterUserUseCase(user_repo, media_uploader)
        result = await use_case.execute(_registration(), profile_photo=photo)

        assert media_uploader.calls[0]["resource_type"] == "image"
        stored = user_repo.users[result.id]
        assert stored.profile.profile_photo == "https://res.cloudinary.com/demo/image/upload/v1/me.png"

    @pytest.mark.asyncio
    async def test_register_upload_failure_creates_nothing(
        self, user_repo, failing_media_uploader, mock_settings
    ):
        photo = MediaFile(filename="me.png", content=b"\x89PNG", content_type="image/png")
        use_case = RegisterUserUseCase(user_repo, failing_media_uploader)

        with pytest.raises(UploadError, match="Image upload failed"):
            await use_case.execute(_registration(), profile_photo=photo)
        assert user_repo.users == {}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"email": "not-an-email"}, "Invalid email format"),
            ({"email": "a@b@c.com"}, "Invalid email format"),
            ({"fullname": "   "}, "All fields are required"),
            ({"password": "a" * 73}, "Password is too long"),
            ({"password": "é" * 40}, "Password is too long"),
        ],
    )
    async def test_register_rejects_bad_input_before_upload(
        self, user_repo, media_uploader, mock_settings, overrides, message
    ):
        photo = MediaFile(filename="me.png", content=b"\x89PNG", content_type="image/png")
        use_case = RegisterUserUseCase(user_repo, media_uploader)

        with pytest.raises(ValidationError, match=message):
            await use_case.execute(_registration(**overrides), profile_photo=photo)
        assert media_uploader.calls == []
        assert user_repo.users == {}

    @pytest.mark.asyncio
    async def test_register_accepts_password_at_bcrypt_limit(self, user_repo, media_uploader, mock_settings):
        use_case = RegisterUserUseCase(user_repo, media_uploader)
        result = await use_case.execute(_registration(password="a" * 72))

        stored = user_repo.users[result.id]
        assert verify_password("a" * 72, stored.hashed_password) is True

    @pytest.mark.asyncio
    async def test_register_conflict_checked_before_upload(self, mock_user_repo, media_uploader):
        mock_user_repo.find_by_email.return_value = User(
            id="usr-1",
            fullname="Existing",
            email="asha@example.com",
            phone_number="1",
            hashed_password="hash",
            role=UserRole.RECRUITER,
        )
        photo = MediaFile(filename="me.png", content=b"x")

        use_case = RegisterUserUseCase(mock_user_repo, media_uploader)
        with pytest.raises(ConflictError):
            await use_case.execute(_registration(), profile_photo=photo)
        assert media_uploader.calls == []
        mock_user_repo.save.assert_not_called()


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.fixture
    def stored_user(self, mock_settings):
        return User(
            id="usr-123",
            fullname="Test User",
            email="test@example.com",
            phone_number="5550100",
            hashed_password=hash_password("validpass123"),
            role=UserRole.RECRUITER,
        )

    @pytest.mark.asyncio
    async def test_login_success(self, mock_user_repo, stored_user, mock_settings):
        mock_user_repo.find_by_email.return_value = stored_user

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserLoginRequest(email="test@example.com", password="validpass123", role="recruiter")
        )
        assert isinstance(result, LoginResult)
        assert len(result.access_token) > 0
        assert result.user.id == "usr-123"
        assert result.user.phone_number == "5550100"
        assert "password" not in result.user.model_dump()
        assert "hashed_password" not in result.user.model_dump()

    @pytest.mark.asyncio
    async def test_login_token_embeds_user_id(self, mock_user_repo, stored_user, mock_settings):
        from jobportal_accounts.core.security import decode_jwt_token

        mock_user_repo.find_by_email.return_value = stored_user
        result = await LoginUserUseCase(mock_user_repo).execute(
            UserLoginRequest(email="test@example.com", password="validpass123", role="recruiter")
        )
        assert decode_jwt_token(result.access_token)["sub"] == "usr-123"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["email", "password", "role"])
    async def test_login_missing_field_raises_validation(self, mock_user_repo, missing):
        fields = {"email": "test@example.com", "password": "validpass123", "role": "recruiter"}
        fields[missing] = None

        with pytest.raises(ValidationError):
            await LoginUserUseCase(mock_user_repo).execute(UserLoginRequest(**fields))
        mock_user_repo.find_by_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_email_and_wrong_password_share_message(
        self, mock_user_repo, stored_user, mock_settings
    ):
        use_case = LoginUserUseCase(mock_user_repo)

        mock_user_repo.find_by_email.return_value = None
        with pytest.raises(AuthError) as unknown_email:
            await use_case.execute(
                UserLoginRequest(email="nobody@example.com", password="validpass123", role="recruiter")
            )

        mock_user_repo.find_by_email.return_value = stored_user
        with pytest.raises(AuthError) as wrong_password:
            await use_case.execute(
                UserLoginRequest(email="test@example.com", password="wrongpassword", role="recruiter")
            )

        assert unknown_email.value.user_message == wrong_password.value.user_message
        assert unknown_email.value.user_message == "Incorrect email or password."

    @pytest.mark.asyncio
    async def test_wrong_role_raises_generic_auth_error(self, mock_user_repo, stored_user, mock_settings):
        mock_user_repo.find_by_email.return_value = stored_user

        with pytest.raises(AuthError) as exc_info:
            await LoginUserUseCase(mock_user_repo).execute(
                UserLoginRequest(email="test@example.com", password="validpass123", role="student")
            )
        assert exc_info.value.user_message == "Incorrect email or password."
        assert "role" not in exc_info.value.user_message.lower()


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase"""

    @pytest.mark.asyncio
    async def test_returns_user_id_from_token(self, mock_settings):
        token = create_jwt_token({"sub": "usr-123"})
        assert await GetCurrentUserUseCase().execute(token) == "usr-123"

    @pytest.mark.asyncio
    async def test_missing_token_raises(self, mock_settings):
        with pytest.raises(NotAuthenticatedError, match="not authenticated"):
            await GetCurrentUserUseCase().execute(None)

    @pytest.mark.asyncio
    async def test_invalid_token_raises(self, mock_settings):
        with pytest.raises(NotAuthenticatedError, match="Invalid"):
            await GetCurrentUserUseCase().execute("invalid.jwt.token")

    @pytest.mark.asyncio
    async def test_token_without_subject_raises(self, mock_settings):
        token = create_jwt_token({"email": "x@example.com"})
        with pytest.raises(NotAuthenticatedError):
            await GetCurrentUserUseCase().execute(token)
