from typing import TYPE_CHECKING

from sqlalchemy.orm import selectinload
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select

from ...db import models

if TYPE_CHECKING:
    from ... import schemas


async def get_role(
    session: AsyncSession,
    criteria: "schemas.RoleCriteria",
) -> models.Role | None:
    statement = select(models.Role)
    if criteria.with_permissions:
        statement = statement.options(selectinload(models.Role.permissions))
    if criteria.id is not None:
        statement = statement.where(models.Role.id == criteria.id)
    if criteria.active is not None:
        statement = statement.where(models.Role.active == criteria.active)
    return (await session.exec(statement)).first()


async def get_role_by_name(
    session: AsyncSession,
    name: str,
) -> models.Role | None:
    statement = (
        select(models.Role)
        .where(models.Role.name == name)
        .options(selectinload(models.Role.permissions))
    )
    return (await session.exec(statement)).first()


async def get_permission_by_name(
    session: AsyncSession,
    name: str,
) -> models.Permission | None:
    statement = select(models.Permission).where(models.Permission.name == name)
    return (await session.exec(statement)).first()
