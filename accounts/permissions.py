"""
Accounts app permissions

Role-based access: admins may act on any user's data, members only on
their own.
"""
from rest_framework import permissions


def _is_admin(user) -> bool:
    return getattr(user, 'is_admin_role', False)


class IsAdminOrSelf(permissions.BasePermission):
    """
    For User objects: admins reach any account, members only their own.
    """

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated)

    def has_object_permission(self, request, view, obj):
        return _is_admin(request.user) or obj == request.user


class IsOwnerOrAdmin(permissions.BasePermission):
    """
    For records carrying a ``user`` foreign key (resumes, export records).
    """

    def has_object_permission(self, request, view, obj):
        if _is_admin(request.user):
            return True
        return getattr(obj, 'user_id', None) == request.user.id


class IsAdminRole(permissions.BasePermission):
    """
    Only users with the ADMIN role.
    """

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and _is_admin(request.user))
