"""
Unit tests for MongoUserRepository against a mocked Motor collection.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from cloud_saas.core.exceptions import ConflictError, InternalError, NotFoundError
from cloud_saas.domain.models.user import User
from cloud_saas.infrastructure.db.mongo_user_repository import MongoUserRepository


def _document(object_id: ObjectId, **overrides) -> dict:
    document = {
        "_id": object_id,
        "fullName": "Ada Lovelace",
        "email": "a@x.com",
        "country": "UK",
        "password": "$2b$10$hash",
        "createdAt": datetime(2025, 1, 1, 12, 0, 0),
        "updatedAt": datetime(2025, 1, 2, 12, 0, 0),
    }
    document.update(overrides)
    return document


def _new_user(**overrides) -> User:
    fields = dict(id=None, full_name="Ada", email="a@x.com", country="UK", hashed_password="$2b$10$hash")
    fields.update(overrides)
    return User(**fields)


@pytest.fixture
def collection():
    return MagicMock(
        find_one=AsyncMock(),
        insert_one=AsyncMock(),
        find_one_and_update=AsyncMock(),
        create_index=AsyncMock(),
    )


class TestFind:
    @pytest.mark.asyncio
    async def test_find_by_email_maps_camel_case_document(self, collection):
        object_id = ObjectId()
        collection.find_one.return_value = _document(object_id)

        user = await MongoUserRepository(collection).find_by_email("a@x.com")

        collection.find_one.assert_awaited_once_with({"email": "a@x.com"})
        assert user.id == str(object_id)
        assert user.full_name == "Ada Lovelace"
        assert user.country == "UK"
        assert user.hashed_password == "$2b$10$hash"
        assert user.created_at.tzinfo == timezone.utc

    @pytest.mark.asyncio
    async def test_find_by_email_missing_returns_none(self, collection):
        collection.find_one.return_value = None
        assert await MongoUserRepository(collection).find_by_email("a@x.com") is None

    @pytest.mark.asyncio
    async def test_find_by_email_blank_skips_query(self, collection):
        assert await MongoUserRepository(collection).find_by_email("") is None
        collection.find_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_find_by_invalid_id_returns_none(self, collection):
        assert await MongoUserRepository(collection).find_by_id("not-an-object-id") is None
        collection.find_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_driver_error_becomes_internal_error(self, collection):
        collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(InternalError) as exc_info:
            await MongoUserRepository(collection).find_by_email("a@x.com")

        assert exc_info.value.user_message == "Server error"
        assert "no servers" in exc_info.value.message


class TestSave:
    @pytest.mark.asyncio
    async def test_insert_sets_id_and_timestamps(self, collection):
        object_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=object_id)

        saved = await MongoUserRepository(collection).save(_new_user())

        inserted = collection.insert_one.await_args.args[0]
        assert inserted["fullName"] == "Ada"
        assert inserted["password"] == "$2b$10$hash"
        assert inserted["createdAt"] == inserted["updatedAt"]
        assert saved.id == str(object_id)
        assert saved.created_at is not None

    @pytest.mark.asyncio
    async def test_duplicate_key_becomes_conflict(self, collection):
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key error")

        with pytest.raises(ConflictError) as exc_info:
            await MongoUserRepository(collection).save(_new_user())

        assert exc_info.value.user_message == "Email already exists"

    @pytest.mark.asyncio
    async def test_update_sets_fields_and_updated_at(self, collection):
        object_id = ObjectId()
        collection.find_one_and_update.return_value = _document(object_id, password="$2b$10$new")

        saved = await MongoUserRepository(collection).save(
            _new_user(id=str(object_id), hashed_password="$2b$10$new")
        )

        query, update = collection.find_one_and_update.await_args.args
        assert query == {"_id": object_id}
        assert update["$set"]["password"] == "$2b$10$new"
        assert "updatedAt" in update["$set"]
        assert "createdAt" not in update["$set"]
        assert saved.hashed_password == "$2b$10$new"

    @pytest.mark.asyncio
    async def test_update_missing_user_raises_not_found(self, collection):
        collection.find_one_and_update.return_value = None

        with pytest.raises(NotFoundError):
            await MongoUserRepository(collection).save(_new_user(id=str(ObjectId())))


class TestEnsureIndexes:
    @pytest.mark.asyncio
    async def test_creates_unique_email_index(self, collection):
        await MongoUserRepository(collection).ensure_indexes()

        keys = collection.create_index.await_args.args[0]
        assert keys == [("email", 1)]
        assert collection.create_index.await_args.kwargs["unique"] is True
