import pytest
import pytest_asyncio

from user_directory import (
    config,
    operations,
    schemas,
)
from user_directory.db import commands
from user_directory.db.engine import (
    create_tables,
    dispose_engines,
    get_engine,
    get_session_maker,
)


@pytest.fixture
def settings():
    original_settings = config.get_settings()
    # the lowest cost bcrypt accepts, keeps the suite fast
    return original_settings.model_copy(update={"password_salt_rounds": 4})


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = get_engine(f"sqlite+aiosqlite:///{tmp_path / 'user_directory.db'}")
    await create_tables(engine)
    yield engine
    await dispose_engines()


@pytest.fixture
def db_session_maker(db_engine):
    yield get_session_maker(db_engine)


@pytest_asyncio.fixture
async def db_session(db_session_maker):
    async with db_session_maker() as session:
        yield session


@pytest.fixture
def service(db_session, settings):
    return operations.get_user_directory_service(db_session, settings)


@pytest_asyncio.fixture
async def sample_roles(db_session):
    created = {}
    for to_create in (
        schemas.RoleCreate(
            name="admin", permissions=["users:read", "users:write", "roles:read"]
        ),
        schemas.RoleCreate(name="viewer", permissions=["users:read"]),
        schemas.RoleCreate(name="retired", active=False, permissions=["users:read"]),
    ):
        created[to_create.name] = await commands.create_role(db_session, to_create)
    yield created


@pytest_asyncio.fixture
async def sample_users(service):
    """Creates Ana and Dan as active users and Ban as a deactivated one."""
    created = {}
    for name in ("Ana", "Dan", "Ban"):
        created[name] = await service.create_account(
            schemas.UserCreate(
                name=name,
                email=f"{name.lower()}@x.com",
                password=f"{name.lower()}-secret123",
            )
        )
    created["Ban"] = await service.remove_one(created["Ban"].id)
    yield created
