from .common import (
    PermissionId,
    RoleId,
    UserId,
)
from .pagination import (
    Page,
    PaginationOptions,
)
from .roles import (
    PermissionRead,
    RoleCreate,
    RoleCriteria,
    RoleReadDetail,
    RoleReadListItem,
)
from .users import (
    UserCreate,
    UserCriteria,
    UserListQuery,
    UserReadDetail,
    UserReadListItem,
    UserRoleUpdate,
)

__all__ = [
    Page,
    PaginationOptions,
    PermissionId,
    PermissionRead,
    RoleCreate,
    RoleCriteria,
    RoleId,
    RoleReadDetail,
    RoleReadListItem,
    UserCreate,
    UserCriteria,
    UserId,
    UserListQuery,
    UserReadDetail,
    UserReadListItem,
    UserRoleUpdate,
]
