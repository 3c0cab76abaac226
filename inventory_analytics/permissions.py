from enum import Enum

from .errors import PermissionDeniedError


class Role(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    VIEWER = "viewer"


def _as_role(role: "Role | str") -> Role:
    try:
        return Role(role)
    except ValueError:
        raise PermissionDeniedError(f"Unknown role: {role!r}") from None


def can_edit(role: "Role | str") -> bool:
    """Admins and managers may create and update records."""
    return _as_role(role) in (Role.ADMIN, Role.MANAGER)


def can_delete(role: "Role | str") -> bool:
    """Only admins may delete records."""
    return _as_role(role) is Role.ADMIN


def require_edit(role: "Role | str") -> None:
    if not can_edit(role):
        raise PermissionDeniedError(f"Role '{Role(role).value}' cannot edit inventory.")


def require_delete(role: "Role | str") -> None:
    if not can_delete(role):
        raise PermissionDeniedError(f"Role '{Role(role).value}' cannot delete inventory.")
