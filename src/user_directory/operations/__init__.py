from sqlmodel.ext.asyncio.session import AsyncSession

from .. import config
from ..db.stores import (
    SqlRoleStore,
    SqlUserStore,
)
from .users import UserDirectoryService


def get_user_directory_service(
    session: AsyncSession,
    settings: config.UserDirectorySettings,
) -> UserDirectoryService:
    return UserDirectoryService(
        user_store=SqlUserStore(session),
        role_store=SqlRoleStore(session),
        settings=settings,
    )


__all__ = [
    get_user_directory_service,
    UserDirectoryService,
]
