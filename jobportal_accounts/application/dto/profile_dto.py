from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProfileUpdateRequest(BaseModel):
    """DTO for a partial profile update; None or empty means 'leave unchanged'"""
    model_config = ConfigDict(populate_by_name=True)

    fullname: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")
    bio: Optional[str] = None
    skills: Optional[str] = None  # comma-separated
