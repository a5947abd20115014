# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, UserProfile
from ...domain.constants import UserFields, ProfileFields
from ...domain.exceptions import ConflictError
from ...utils.datetime_utils import utc_now
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def ensure_indexes(self) -> None:
        """Create the unique email index; the store is the authority on uniqueness."""
        await self.user_collection.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)
        logger.info("Ensured unique index on users.email")

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            ConflictError: If another user already has this email
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)
        user_dict[UserFields.UPDATED_AT] = utc_now()

        try:
            if user.id:
                return await self._update(user.id, user_dict)
            return await self._insert(user_dict)
        except DuplicateKeyError:
            raise ConflictError()
        except (ValueError, ConflictError):
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

    async def _insert(self, user_dict: dict) -> User:
        user_dict.pop(UserFields.MONGO_ID, None)
        user_dict[UserFields.CREATED_AT] = user_dict[UserFields.UPDATED_AT]

        result = await self.user_collection.insert_one(user_dict)

        new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        if new_document is None:
            raise RuntimeError("User was created but could not be retrieved")
        return self._document_to_user(new_document)

    async def _update(self, user_id: str, user_dict: dict) -> User:
        try:
            object_id = ObjectId(user_id)
        except (InvalidId, TypeError):
            raise ValueError(f"Invalid user ID format: {user_id}")

        update_result = await self.user_collection.update_one(
            {UserFields.MONGO_ID: object_id},
            {"$set": {k: v for k, v in user_dict.items() if k != UserFields.MONGO_ID}}
        )
        if update_result.matched_count == 0:
            raise ValueError(f"User with ID {user_id} not found")

        updated_document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        if updated_document is None:
            raise RuntimeError(f"User {user_id} was updated but could not be retrieved")
        return self._document_to_user(updated_document)

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        profile = document.get(UserFields.PROFILE) or {}
        return User(
            id=str(document[UserFields.MONGO_ID]),
            fullname=document.get(UserFields.FULL_NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            phone_number=str(document.get(UserFields.PHONE_NUMBER, "")),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            role=document.get(UserFields.ROLE),
            profile=UserProfile(
                bio=profile.get(ProfileFields.BIO),
                skills=list(profile.get(ProfileFields.SKILLS) or []),
                resume=profile.get(ProfileFields.RESUME),
                resume_original_name=profile.get(ProfileFields.RESUME_ORIGINAL_NAME),
                profile_photo=profile.get(ProfileFields.PROFILE_PHOTO) or "",
            ),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        user_dict = {
            UserFields.FULL_NAME: user.fullname,
            UserFields.EMAIL: user.email,
            UserFields.PHONE_NUMBER: user.phone_number,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.ROLE: user.role.value,
            UserFields.PROFILE: {
                ProfileFields.BIO: user.profile.bio,
                ProfileFields.SKILLS: list(user.profile.skills),
                ProfileFields.RESUME: user.profile.resume,
                ProfileFields.RESUME_ORIGINAL_NAME: user.profile.resume_original_name,
                ProfileFields.PROFILE_PHOTO: user.profile.profile_photo,
            },
        }

        # Only include _id if user.id is valid
        if user.id:
            try:
                user_dict[UserFields.MONGO_ID] = ObjectId(user.id)
            except (InvalidId, ValueError, TypeError):
                # If ID is invalid, don't include it (will create new document)
                pass

        return user_dict
