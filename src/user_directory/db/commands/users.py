import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from ... import schemas
from .. import (
    models,
    queries,
)

logger = logging.getLogger(__name__)


async def save_user(
    session: AsyncSession,
    user: models.User,
) -> models.User:
    """Insert or update a user and return the stored record with its role loaded."""
    session.add(user)
    await session.commit()
    logger.debug(f"Saved user {user.id}")
    return await queries.get_user(
        session, schemas.UserCriteria(id=user.id, with_role=True)
    )
