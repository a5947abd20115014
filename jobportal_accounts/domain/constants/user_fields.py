"""Constants for User model field names"""


class UserFields:
    """Field name constants for User documents"""
    FULL_NAME = "fullname"
    EMAIL = "email"
    PHONE_NUMBER = "phoneNumber"
    HASHED_PASSWORD = "password"
    ROLE = "role"
    PROFILE = "profile"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class ProfileFields:
    """Field name constants for the nested profile sub-document"""
    BIO = "bio"
    SKILLS = "skills"
    RESUME = "resume"
    RESUME_ORIGINAL_NAME = "resumeOriginalName"
    PROFILE_PHOTO = "profilePhoto"
