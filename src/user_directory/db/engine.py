import sqlmodel
from sqlalchemy.ext.asyncio.session import async_sessionmaker
from sqlalchemy.ext.asyncio.engine import (
    AsyncEngine,
    create_async_engine,
)
from sqlmodel.ext.asyncio.session import AsyncSession

from . import models  # noqa: F401, registers the tables on the metadata

_DB_ENGINES: dict[str, AsyncEngine] = {}


def get_engine(db_dsn: str, debug: bool = False) -> AsyncEngine:
    # Engines are cached per DSN in the module global `_DB_ENGINES` so that the
    # same connection pool is reused throughout the lifecycle of the
    # application. Call `dispose_engines()` to clear the cache.
    if (engine := _DB_ENGINES.get(db_dsn)) is None:
        engine = create_async_engine(db_dsn, echo=debug)
        _DB_ENGINES[db_dsn] = engine
    return engine


async def dispose_engines() -> None:
    while _DB_ENGINES:
        _, engine = _DB_ENGINES.popitem()
        await engine.dispose()


def get_session_maker(engine: AsyncEngine):
    return async_sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        expire_on_commit=False,
        class_=AsyncSession,
    )


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as connection:
        await connection.run_sync(sqlmodel.SQLModel.metadata.create_all)


async def drop_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as connection:
        await connection.run_sync(sqlmodel.SQLModel.metadata.drop_all)
