import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from ... import (
    errors,
    schemas,
)
from .. import (
    models,
    queries,
)

logger = logging.getLogger(__name__)


async def create_permission(
    session: AsyncSession,
    name: str,
) -> models.Permission:
    if (existing := await queries.get_permission_by_name(session, name)) is not None:
        return existing
    permission = models.Permission(name=name)
    session.add(permission)
    await session.flush()
    return permission


async def create_role(
    session: AsyncSession,
    to_create: schemas.RoleCreate,
) -> models.Role:
    if await queries.get_role_by_name(session, to_create.name):
        raise errors.UserDirectoryClientError(
            f"Role {to_create.name!r} already exists."
        )
    permissions = [
        await create_permission(session, name)
        for name in dict.fromkeys(to_create.permissions)
    ]
    role = models.Role(
        name=to_create.name,
        active=to_create.active,
        permissions=permissions,
    )
    session.add(role)
    await session.commit()
    logger.debug(f"Created role {role.name!r} with {len(permissions)} permission(s)")
    return await queries.get_role(
        session, schemas.RoleCriteria(id=role.id, with_permissions=True)
    )


async def set_role_active(
    session: AsyncSession,
    role: models.Role,
    active: bool,
) -> models.Role:
    role.active = active
    session.add(role)
    await session.commit()
    return role
