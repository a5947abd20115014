# Standard library imports
import os
from typing import Final, List, Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "jobportal")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440")
        )

        # Password hashing
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))

        # Session cookie
        self.session_cookie_name: Final[str] = os.getenv("SESSION_COOKIE_NAME", "token")
        self.session_cookie_secure: Final[bool] = _env_bool("SESSION_COOKIE_SECURE", "false")

        # Media host (Cloudinary)
        self.cloudinary_cloud_name: Final[str] = os.getenv("CLOUDINARY_CLOUD_NAME", "")
        self.cloudinary_api_key: Final[str] = os.getenv("CLOUDINARY_API_KEY", "")
        self.cloudinary_api_secret: Final[str] = os.getenv("CLOUDINARY_API_SECRET", "")
        self.cloudinary_api_base_url: Final[str] = os.getenv(
            "CLOUDINARY_API_BASE_URL",
            "https://api.cloudinary.com"
        )
        self.resume_upload_folder: Final[str] = os.getenv("RESUME_UPLOAD_FOLDER", "resumes")

        # HTTP / logging
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
            if origin.strip()
        ]
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def session_max_age_seconds(self) -> int:
        """Cookie lifetime; always equal to the token lifetime."""
        return self.access_token_expire_minutes * 60


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
