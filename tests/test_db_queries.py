import pytest

from user_directory import (
    constants,
    schemas,
)
from user_directory.db import queries


@pytest.mark.parametrize(
    "query, expected_total",
    [
        pytest.param(schemas.UserListQuery(), 2, id="active"),
        pytest.param(schemas.UserListQuery(active=False), 1, id="inactive"),
        pytest.param(schemas.UserListQuery(search="a"), 2, id="search"),
        pytest.param(schemas.UserListQuery(active=False, search="d"), 0, id="none"),
    ],
)
@pytest.mark.asyncio
async def test_list_users_total(db_session, sample_users, query, expected_total):
    users, total = await queries.list_users(db_session, query, include_total=True)
    assert total == expected_total
    assert len(users) == expected_total


@pytest.mark.asyncio
async def test_list_users_without_total(db_session, sample_users):
    users, total = await queries.list_users(db_session, schemas.UserListQuery())
    assert total is None
    assert len(users) == 2


@pytest.mark.asyncio
async def test_paginated_list_users(db_session, sample_users):
    users, total = await queries.paginated_list_users(
        db_session,
        schemas.UserListQuery(
            sort_key=constants.UserSortKey.EMAIL,
            sort_order=constants.SortOrder.DESCENDING,
        ),
        page=1,
        page_size=1,
        include_total=True,
    )
    assert [u.email for u in users] == ["dan@x.com"]
    assert total == 2


@pytest.mark.parametrize(
    "criteria, expected_name",
    [
        pytest.param(schemas.UserCriteria(email="ana@x.com"), "Ana", id="email"),
        pytest.param(
            schemas.UserCriteria(email="ban@x.com", active=True), None, id="inactive"
        ),
        pytest.param(
            schemas.UserCriteria(email="ban@x.com", active=False), "Ban", id="filtered"
        ),
        pytest.param(schemas.UserCriteria(email="nobody@x.com"), None, id="missing"),
    ],
)
@pytest.mark.asyncio
async def test_get_user(db_session, sample_users, criteria, expected_name):
    user = await queries.get_user(db_session, criteria)
    assert (user.name if user else None) == expected_name


@pytest.mark.asyncio
async def test_get_role(db_session, sample_roles):
    retired_id = sample_roles["retired"].id
    assert (
        await queries.get_role(
            db_session, schemas.RoleCriteria(id=retired_id, active=True)
        )
        is None
    )
    role = await queries.get_role(
        db_session, schemas.RoleCriteria(id=retired_id, with_permissions=True)
    )
    assert [p.name for p in role.permissions] == ["users:read"]
