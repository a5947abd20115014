from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class UserRole(str, Enum):
    """Closed set of account roles"""
    STUDENT = "student"
    RECRUITER = "recruiter"


def is_valid_email(email: Optional[str]) -> bool:
    """Minimal shape check: something before and after a single @, no spaces."""
    if not email or " " in email.strip():
        return False
    local, sep, domain = email.strip().partition("@")
    return bool(sep and local and domain and "@" not in domain)


def parse_skills(raw_skills: str) -> List[str]:
    """Split a comma-separated skills string, trimming items and dropping empty ones."""
    return [skill.strip() for skill in raw_skills.split(",") if skill.strip()]


@dataclass
class UserProfile:
    """Nested profile data; every field is optional until the user fills it in"""
    bio: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    resume: Optional[str] = None
    resume_original_name: Optional[str] = None
    profile_photo: str = ""


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    fullname: str
    email: str
    phone_number: str
    hashed_password: str
    role: UserRole
    profile: UserProfile = field(default_factory=UserProfile)

    def __post_init__(self):
        """Business validations"""
        if not self.fullname or not self.fullname.strip():
            raise ValueError("Full name is required")
        if not is_valid_email(self.email):
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
        self.role = UserRole(self.role)
