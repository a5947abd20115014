from .user import User, UserProfile, UserRole, is_valid_email, parse_skills
from .media import MediaFile, UploadResult

__all__ = ["User", "UserProfile", "UserRole", "is_valid_email", "parse_skills", "MediaFile", "UploadResult"]
