"""Service tests that run against in-memory stores instead of a database."""

import itertools

import pytest

from user_directory import (
    errors,
    schemas,
)
from user_directory.db import models
from user_directory.operations import UserDirectoryService


class InMemoryUserStore:
    def __init__(self):
        self.users: dict[int, models.User] = {}
        self.saved: list[models.User] = []
        self._ids = itertools.count(1)

    def _matches(self, user: models.User, criteria: schemas.UserCriteria) -> bool:
        return (
            (criteria.id is None or user.id == criteria.id)
            and (criteria.email is None or user.email == criteria.email)
            and (criteria.active is None or user.active == criteria.active)
        )

    async def find_one(self, criteria):
        return next(
            (u for u in self.users.values() if self._matches(u, criteria)), None
        )

    async def find_one_or_fail(self, criteria):
        if (user := await self.find_one(criteria)) is None:
            raise errors.NotFoundError("user", criteria.describe())
        return user

    async def find_page(self, query, options):
        matching = [u for u in self.users.values() if u.active == query.active]
        start = options.page_size * (options.page - 1)
        return matching[start : start + options.page_size], len(matching)

    async def save(self, user):
        if user.id is None:
            user.id = next(self._ids)
        self.users[user.id] = user
        self.saved.append(user)
        return user


class InMemoryRoleStore:
    def __init__(self, *roles: models.Role):
        self.roles = {role.id: role for role in roles}

    async def find_one_or_fail(self, criteria):
        role = self.roles.get(criteria.id)
        if role is None or (
            criteria.active is not None and role.active != criteria.active
        ):
            raise errors.NotFoundError("role", criteria.describe())
        return role


@pytest.fixture
def user_store():
    return InMemoryUserStore()


@pytest.fixture
def role_store():
    return InMemoryRoleStore(
        models.Role(id=1, name="editor", active=True),
        models.Role(id=2, name="legacy", active=False),
    )


@pytest.fixture
def in_memory_service(user_store, role_store, settings):
    return UserDirectoryService(user_store, role_store, settings)


@pytest.mark.asyncio
async def test_duplicate_email_performs_no_write(in_memory_service, user_store):
    to_create = schemas.UserCreate(name="Ana", email="ana@x.com", password="secret123")
    await in_memory_service.create_account(to_create)
    assert len(user_store.saved) == 1
    with pytest.raises(errors.DuplicateEmailError):
        await in_memory_service.create_account(to_create)
    assert len(user_store.saved) == 1


@pytest.mark.asyncio
async def test_plaintext_password_is_never_saved(in_memory_service, user_store):
    await in_memory_service.create_account(
        schemas.UserCreate(name="Ana", email="ana@x.com", password="secret123")
    )
    (saved,) = user_store.saved
    assert saved.password != "secret123"
    assert "secret123" not in saved.model_dump_json()


@pytest.mark.asyncio
async def test_update_role_checks_user_before_role(in_memory_service):
    with pytest.raises(errors.NotFoundError) as exc_info:
        await in_memory_service.update_role(
            schemas.UserId(42), schemas.UserRoleUpdate(role=2)
        )
    assert exc_info.value.entity_name == "user"


@pytest.mark.asyncio
async def test_update_role_rejects_inactive_role(in_memory_service, user_store):
    created = await in_memory_service.create_account(
        schemas.UserCreate(name="Ana", email="ana@x.com", password="secret123")
    )
    with pytest.raises(errors.NotFoundError) as exc_info:
        await in_memory_service.update_role(created.id, schemas.UserRoleUpdate(role=2))
    assert exc_info.value.entity_name == "role"
    assert len(user_store.saved) == 1


@pytest.mark.asyncio
async def test_remove_one_flips_active_flag(in_memory_service, user_store):
    created = await in_memory_service.create_account(
        schemas.UserCreate(name="Ana", email="ana@x.com", password="secret123")
    )
    removed = await in_memory_service.remove_one(created.id)
    assert removed.active is False
    assert user_store.users[created.id].email == "ana@x.com"
    with pytest.raises(errors.NotFoundError):
        await in_memory_service.remove_one(created.id)
