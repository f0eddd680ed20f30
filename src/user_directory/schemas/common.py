from typing import NewType

PermissionId = NewType("PermissionId", int)
RoleId = NewType("RoleId", int)
UserId = NewType("UserId", int)


def describe_criteria(**criteria) -> str:
    """Render the non-empty criteria of a lookup, for use in error messages."""
    parts = [f"{key}={value!r}" for key, value in criteria.items() if value is not None]
    return ", ".join(parts) if parts else "any criteria"
