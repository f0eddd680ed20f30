from typing import TYPE_CHECKING

from sqlalchemy.orm import selectinload
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import (
    col,
    select,
)

from ... import constants
from ...db import models
from .common import _get_total_num_records

if TYPE_CHECKING:
    from ... import schemas


def _get_loader_options(with_role: bool, with_permissions: bool) -> list:
    if with_permissions:
        return [
            selectinload(models.User.role).selectinload(models.Role.permissions)
        ]
    if with_role:
        return [selectinload(models.User.role)]
    return []


async def get_user(
    session: AsyncSession,
    criteria: "schemas.UserCriteria",
) -> models.User | None:
    statement = select(models.User).options(
        *_get_loader_options(criteria.with_role, criteria.with_permissions)
    )
    if criteria.id is not None:
        statement = statement.where(models.User.id == criteria.id)
    if criteria.email is not None:
        statement = statement.where(models.User.email == criteria.email)
    if criteria.active is not None:
        statement = statement.where(models.User.active == criteria.active)
    # the instance may already sit in the session's identity map with stale
    # attributes, e.g. right after a commit
    statement = statement.execution_options(populate_existing=True)
    return (await session.exec(statement)).first()


async def paginated_list_users(
    session: AsyncSession,
    query: "schemas.UserListQuery",
    page: int = 1,
    page_size: int = 20,
    include_total: bool = False,
) -> tuple[list[models.User], int | None]:
    limit = page_size
    offset = limit * (page - 1)
    return await list_users(session, query, limit, offset, include_total)


async def list_users(
    session: AsyncSession,
    query: "schemas.UserListQuery",
    limit: int = 20,
    offset: int = 0,
    include_total: bool = False,
) -> tuple[list[models.User], int | None]:
    statement = select(models.User).where(models.User.active == query.active)
    if query.search:
        statement = statement.where(
            col(models.User.name).ilike(f"%{query.search}%")
        )
    sort_column = col(getattr(models.User, query.sort_key.value))
    ordered = statement.order_by(
        sort_column.desc()
        if query.sort_order == constants.SortOrder.DESCENDING
        else sort_column.asc()
    ).options(selectinload(models.User.role))
    ordered = ordered.execution_options(populate_existing=True)
    items = (await session.exec(ordered.offset(offset).limit(limit))).all()
    num_total = (
        await _get_total_num_records(session, statement) if include_total else None
    )
    return list(items), num_total

