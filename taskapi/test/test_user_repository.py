"""
Tests for the Tortoise user repository on an in-memory database
"""
from uuid import UUID, uuid4

import pytest

from taskapi.domain.entity.user_entity import UserEntity
from taskapi.domain.exception.domain_exceptions import ConflictError
from taskapi.domain.exception.user_exceptions import UsernameAlreadyExistsException


def new_user(username: str = "alice", name: str = "Alice A") -> UserEntity:
    return UserEntity(id=None, username=username, name=name, password_hash="$2b$04$stub")


class TestTortoiseUserRepository:

    async def test_save_assigns_identifier(self, user_repository):
        user = await user_repository.save(new_user())

        assert user.id is not None
        assert UUID(user.id)

    async def test_saved_users_get_distinct_identifiers(self, user_repository):
        first = await user_repository.save(new_user("alice"))
        second = await user_repository.save(new_user("bob"))

        assert first.id != second.id

    async def test_exists_by_username(self, user_repository):
        assert await user_repository.exists_by_username("alice") is False

        await user_repository.save(new_user())

        assert await user_repository.exists_by_username("alice") is True

    async def test_exists_by_id(self, user_repository):
        user = await user_repository.save(new_user())

        assert await user_repository.exists_by_id(user.id) is True
        assert await user_repository.exists_by_id(str(uuid4())) is False
        assert await user_repository.exists_by_id("not-a-uuid") is False

    async def test_get_user_by_id(self, user_repository):
        saved = await user_repository.save(new_user())

        found = await user_repository.get_user_by_id(saved.id)

        assert found == saved
        assert found.password_hash == "$2b$04$stub"

    async def test_get_user_by_name(self, user_repository):
        saved = await user_repository.save(new_user())

        found = await user_repository.get_user_by_name("alice")

        assert found is not None
        assert found.id == saved.id
        assert found.name == "Alice A"

    async def test_missing_users_return_none(self, user_repository):
        assert await user_repository.get_user_by_id(str(uuid4())) is None
        assert await user_repository.get_user_by_id("garbage") is None
        assert await user_repository.get_user_by_name("nobody") is None

    async def test_unique_constraint_surfaces_as_conflict(self, user_repository):
        """Two inserts that both passed an existence check"""
        await user_repository.save(new_user("alice", "Alice A"))

        with pytest.raises(UsernameAlreadyExistsException) as exc_info:
            await user_repository.save(new_user("alice", "Someone Else"))

        assert isinstance(exc_info.value, ConflictError)
