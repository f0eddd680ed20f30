import datetime as dt
from typing import Annotated

import pydantic

from .. import constants
from ..db import models
from .common import (
    RoleId,
    UserId,
    describe_criteria,
)
from .roles import (
    RoleReadDetail,
    RoleReadListItem,
)


class UserCreate(pydantic.BaseModel):
    name: Annotated[
        str,
        pydantic.Field(
            min_length=constants.NAME_MIN_LENGTH, max_length=constants.NAME_MAX_LENGTH
        ),
    ]
    email: Annotated[
        str, pydantic.Field(min_length=3, max_length=constants.EMAIL_MAX_LENGTH)
    ]
    # kept as a secret so the plaintext does not leak into reprs or logs
    password: pydantic.SecretStr

    @pydantic.field_validator("password")
    @classmethod
    def validate_password_length(cls, value: pydantic.SecretStr) -> pydantic.SecretStr:
        raw = value.get_secret_value()
        if len(raw) < constants.PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"Password must have at least {constants.PASSWORD_MIN_LENGTH} characters"
            )
        if len(raw.encode("utf-8")) > constants.PASSWORD_MAX_BYTES:
            raise ValueError(
                f"Password must not exceed {constants.PASSWORD_MAX_BYTES} bytes"
            )
        return value


class UserRoleUpdate(pydantic.BaseModel):
    # other fields sent along are dropped, only the role is ever written
    model_config = pydantic.ConfigDict(extra="ignore")

    role: RoleId


class UserListQuery(pydantic.BaseModel):
    active: bool = True
    sort_key: constants.UserSortKey = constants.UserSortKey.ID
    sort_order: constants.SortOrder = constants.SortOrder.ASCENDING
    search: str | None = None


class UserCriteria(pydantic.BaseModel):
    """Filter used by the user store to locate a single user."""

    id: UserId | None = None
    email: str | None = None
    active: bool | None = None
    with_role: bool = False
    with_permissions: bool = False

    def describe(self) -> str:
        return describe_criteria(id=self.id, email=self.email, active=self.active)


class UserReadListItem(pydantic.BaseModel):
    id: UserId
    name: str
    email: str
    active: bool
    created_at: dt.datetime | None
    role: RoleReadListItem | None

    @classmethod
    def from_db_instance(cls, instance: models.User) -> "UserReadListItem":
        return cls(
            **instance.model_dump(exclude={"password"}),
            role=(
                RoleReadListItem(**role.model_dump())
                if (role := instance.role) is not None
                else None
            ),
        )


class UserReadDetail(UserReadListItem):
    updated_at: dt.datetime | None
    role: RoleReadDetail | None

    @classmethod
    def from_db_instance(cls, instance: models.User) -> "UserReadDetail":
        return cls(
            **instance.model_dump(exclude={"password"}),
            role=(
                RoleReadDetail.from_db_instance(role)
                if (role := instance.role) is not None
                else None
            ),
        )
