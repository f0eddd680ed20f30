from .roles import (
    create_permission,
    create_role,
    set_role_active,
)
from .users import save_user

__all__ = [
    create_permission,
    create_role,
    save_user,
    set_role_active,
]
