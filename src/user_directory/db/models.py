import datetime as dt
from functools import partial

from sqlmodel import (
    Column,
    DateTime,
    Field,
    func,
    SQLModel,
    Relationship,
)

from .. import constants

now_ = partial(dt.datetime.now, tz=dt.timezone.utc)


class RolePermissionLink(SQLModel, table=True):
    role_id: int | None = Field(
        default=None, foreign_key="role.id", primary_key=True, ondelete="CASCADE"
    )
    permission_id: int | None = Field(
        default=None, foreign_key="permission.id", primary_key=True, ondelete="CASCADE"
    )


class Permission(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(
        max_length=constants.PERMISSION_NAME_MAX_LENGTH, unique=True, index=True
    )

    roles: list["Role"] = Relationship(
        back_populates="permissions", link_model=RolePermissionLink
    )


class Role(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=constants.ROLE_NAME_MAX_LENGTH, unique=True)
    active: bool = True

    permissions: list[Permission] = Relationship(
        back_populates="roles", link_model=RolePermissionLink
    )
    users: list["User"] = Relationship(back_populates="role")


class User(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=constants.NAME_MAX_LENGTH, index=True)
    # unique across every record, active or not, closing the race left open by
    # the check-then-insert done when creating accounts
    email: str = Field(max_length=constants.EMAIL_MAX_LENGTH, unique=True, index=True)
    # bcrypt hash, never the plaintext
    password: str
    active: bool = Field(default=True, index=True)
    role_id: int | None = Field(default=None, foreign_key="role.id", ondelete="SET NULL")
    created_at: dt.datetime | None = Field(default_factory=now_)
    updated_at: dt.datetime | None = Field(
        default=None, sa_column=Column(DateTime(), onupdate=func.now())
    )

    role: Role | None = Relationship(back_populates="users")


def soft_delete(user: User) -> User:
    """Mark a user as deleted while keeping its record, email and history."""
    user.active = False
    return user
