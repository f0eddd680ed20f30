import logging

from .. import (
    config,
    errors,
    schemas,
    security,
)
from ..db import models
from ..db.stores import (
    RoleStoreProtocol,
    UserStoreProtocol,
)

logger = logging.getLogger(__name__)


class UserDirectoryService:
    """Account creation, lookup, listing, role assignment and soft deletion.

    The service keeps no state of its own between calls, everything goes
    through the stores it is constructed with.
    """

    def __init__(
        self,
        user_store: UserStoreProtocol,
        role_store: RoleStoreProtocol,
        settings: config.UserDirectorySettings,
    ):
        self.user_store = user_store
        self.role_store = role_store
        self.settings = settings

    async def create_account(self, to_create: schemas.UserCreate) -> models.User:
        # NOTE: unlike every other lookup here, this one does not filter on the
        # active flag, so emails of soft-deleted users stay taken
        if await self.user_store.find_one(
            schemas.UserCriteria(email=to_create.email)
        ):
            raise errors.DuplicateEmailError(to_create.email)
        salt = security.generate_salt(self.settings.password_salt_rounds)
        user = models.User(
            **to_create.model_dump(exclude={"password"}),
            password=security.hash_password(
                to_create.password.get_secret_value(), salt
            ),
        )
        created = await self.user_store.save(user)
        logger.info(f"Created user {created.id}")
        return created

    async def find_active_by_email(self, email: str) -> models.User | None:
        return await self.user_store.find_one(
            schemas.UserCriteria(email=email, active=True, with_permissions=True)
        )

    async def list_users(
        self,
        query: schemas.UserListQuery,
        options: schemas.PaginationOptions,
    ) -> schemas.Page[models.User]:
        if options.page_size > (max_size := self.settings.pagination_max_page_size):
            logger.debug(
                f"Requested page size {options.page_size} exceeds maximum, "
                f"using {max_size} instead"
            )
            options = options.model_copy(update={"page_size": max_size})
        items, num_total = await self.user_store.find_page(query, options)
        return schemas.Page.from_results(items, num_total, options)

    async def get_one(
        self,
        user_id: schemas.UserId,
        query: schemas.UserListQuery,
    ) -> models.User:
        return await self.user_store.find_one_or_fail(
            schemas.UserCriteria(id=user_id, active=query.active, with_role=True)
        )

    async def update_role(
        self,
        user_id: schemas.UserId,
        to_update: schemas.UserRoleUpdate,
    ) -> models.User:
        user = await self.user_store.find_one_or_fail(
            schemas.UserCriteria(id=user_id, active=True)
        )
        role = await self.role_store.find_one_or_fail(
            schemas.RoleCriteria(id=to_update.role, active=True)
        )
        user.role = role
        updated = await self.user_store.save(user)
        logger.info(f"Assigned role {role.id} to user {user_id}")
        return updated

    async def remove_one(self, user_id: schemas.UserId) -> models.User:
        user = await self.user_store.find_one_or_fail(
            schemas.UserCriteria(id=user_id, active=True)
        )
        removed = await self.user_store.save(models.soft_delete(user))
        logger.info(f"Deactivated user {user_id}")
        return removed
