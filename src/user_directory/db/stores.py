import logging
from typing import Protocol

from sqlmodel.ext.asyncio.session import AsyncSession

from .. import (
    errors,
    schemas,
)
from . import (
    commands,
    models,
    queries,
)

logger = logging.getLogger(__name__)


class UserStoreProtocol(Protocol):
    async def find_one(self, criteria: schemas.UserCriteria) -> models.User | None:
        raise NotImplementedError

    async def find_one_or_fail(self, criteria: schemas.UserCriteria) -> models.User:
        raise NotImplementedError

    async def find_page(
        self,
        query: schemas.UserListQuery,
        options: schemas.PaginationOptions,
    ) -> tuple[list[models.User], int]:
        raise NotImplementedError

    async def save(self, user: models.User) -> models.User:
        raise NotImplementedError


class RoleStoreProtocol(Protocol):
    async def find_one_or_fail(self, criteria: schemas.RoleCriteria) -> models.Role:
        raise NotImplementedError


class SqlUserStore:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_one(self, criteria: schemas.UserCriteria) -> models.User | None:
        return await queries.get_user(self.session, criteria)

    async def find_one_or_fail(self, criteria: schemas.UserCriteria) -> models.User:
        if (user := await queries.get_user(self.session, criteria)) is None:
            raise errors.NotFoundError("user", criteria.describe())
        return user

    async def find_page(
        self,
        query: schemas.UserListQuery,
        options: schemas.PaginationOptions,
    ) -> tuple[list[models.User], int]:
        return await queries.paginated_list_users(
            self.session,
            query,
            page=options.page,
            page_size=options.page_size,
            include_total=True,
        )

    async def save(self, user: models.User) -> models.User:
        return await commands.save_user(self.session, user)


class SqlRoleStore:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_one_or_fail(self, criteria: schemas.RoleCriteria) -> models.Role:
        if (role := await queries.get_role(self.session, criteria)) is None:
            raise errors.NotFoundError("role", criteria.describe())
        return role
