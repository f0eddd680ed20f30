from .roles import (
    get_permission_by_name,
    get_role,
    get_role_by_name,
)
from .users import (
    get_user,
    list_users,
    paginated_list_users,
)

__all__ = [
    get_permission_by_name,
    get_role,
    get_role_by_name,
    get_user,
    list_users,
    paginated_list_users,
]
