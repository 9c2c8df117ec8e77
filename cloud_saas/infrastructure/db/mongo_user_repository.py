# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import ConflictError, InternalError, NotFoundError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...utils.datetime_utils import ensure_utc, utc_now

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection

    async def ensure_indexes(self) -> None:
        """
        Create the unique index on email.

        The index is the authoritative guard against two concurrent
        registrations with the same address.
        """
        try:
            await self.user_collection.create_index(
                [(UserFields.EMAIL, ASCENDING)],
                unique=True,
                name="email_unique",
            )
        except PyMongoError as e:
            raise InternalError(f"Error creating user indexes: {str(e)}") from e
        logger.info("Unique index on users.%s ensured", UserFields.EMAIL)

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
        except PyMongoError as e:
            raise InternalError(f"Error finding user by email: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise InternalError(f"Error finding user by ID: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID and timestamps set

        Raises:
            ConflictError: If another record already holds the email
            NotFoundError: If updating a user that no longer exists
            InternalError: On any other storage failure
        """
        if user.id:
            return await self._update(user)
        return await self._insert(user)

    async def _insert(self, user: User) -> User:
        now = utc_now()
        user_dict = self._user_to_dict(user)
        user_dict[UserFields.CREATED_AT] = now
        user_dict[UserFields.UPDATED_AT] = now

        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError as e:
            raise ConflictError(f"Duplicate email rejected by unique index: {user.email}") from e
        except PyMongoError as e:
            raise InternalError(f"Error saving user: {str(e)}") from e

        user_dict[UserFields.MONGO_ID] = result.inserted_id
        return self._document_to_user(user_dict)

    async def _update(self, user: User) -> User:
        try:
            object_id = ObjectId(user.id)
        except (InvalidId, TypeError):
            raise NotFoundError(f"Invalid user ID format: {user.id}")

        changes = self._user_to_dict(user)
        changes[UserFields.UPDATED_AT] = utc_now()

        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise ConflictError(f"Duplicate email rejected by unique index: {user.email}") from e
        except PyMongoError as e:
            raise InternalError(f"Error updating user: {str(e)}") from e

        if document is None:
            raise NotFoundError(f"User with ID {user.id} not found")
        return self._document_to_user(document)

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise InternalError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            full_name=document.get(UserFields.FULL_NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            country=document.get(UserFields.COUNTRY, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(UserFields.UPDATED_AT)),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to the mutable part of a MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage (no _id, no timestamps)
        """
        return {
            UserFields.FULL_NAME: user.full_name,
            UserFields.EMAIL: user.email,
            UserFields.COUNTRY: user.country,
            UserFields.HASHED_PASSWORD: user.hashed_password,
        }
