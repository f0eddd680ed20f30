from typing import Annotated

import pydantic

from .. import constants
from ..db import models
from .common import (
    PermissionId,
    RoleId,
    describe_criteria,
)


class RoleCreate(pydantic.BaseModel):
    name: Annotated[
        str,
        pydantic.Field(min_length=1, max_length=constants.ROLE_NAME_MAX_LENGTH),
    ]
    active: bool = True
    permissions: list[
        Annotated[
            str,
            pydantic.Field(
                min_length=1, max_length=constants.PERMISSION_NAME_MAX_LENGTH
            ),
        ]
    ] = []


class RoleCriteria(pydantic.BaseModel):
    """Filter used by the role store to locate a single role."""

    id: RoleId | None = None
    active: bool | None = None
    with_permissions: bool = False

    def describe(self) -> str:
        return describe_criteria(id=self.id, active=self.active)


class PermissionRead(pydantic.BaseModel):
    id: PermissionId
    name: str


class RoleReadListItem(pydantic.BaseModel):
    id: RoleId
    name: str
    active: bool


class RoleReadDetail(RoleReadListItem):
    permissions: list[PermissionRead]

    @classmethod
    def from_db_instance(cls, instance: models.Role) -> "RoleReadDetail":
        return cls(
            **instance.model_dump(),
            permissions=[
                PermissionRead(**p.model_dump()) for p in instance.permissions
            ],
        )
