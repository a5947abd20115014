from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.user import User, UserRole


class ProfileResponse(BaseModel):
    """DTO for the nested profile"""
    model_config = ConfigDict(populate_by_name=True)

    bio: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    resume: Optional[str] = None
    resume_original_name: Optional[str] = Field(default=None, alias="resumeOriginalName")
    profile_photo: str = Field(default="", alias="profilePhoto")


class UserSummaryResponse(BaseModel):
    """DTO returned by registration: identity fields only"""
    id: str
    fullname: str
    email: str
    role: UserRole

    @classmethod
    def from_user(cls, user: User) -> "UserSummaryResponse":
        return cls(id=user.id or "", fullname=user.fullname, email=user.email, role=user.role)


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    fullname: str
    email: str
    phone_number: str = Field(alias="phoneNumber")
    role: UserRole
    profile: ProfileResponse

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        profile = user.profile
        return cls(
            id=user.id or "",
            fullname=user.fullname,
            email=user.email,
            phone_number=user.phone_number,
            role=user.role,
            profile=ProfileResponse(
                bio=profile.bio,
                skills=list(profile.skills),
                resume=profile.resume,
                resume_original_name=profile.resume_original_name,
                profile_photo=profile.profile_photo,
            ),
        )
