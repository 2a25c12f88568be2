from rest_framework.permissions import BasePermission

from .models import User


class HasKirkRole(BasePermission):
    def has_permission(self, request, view):
        return (
            request.user.is_authenticated and
            getattr(request.user, 'role', None) in dict(User.ROLE_CHOICES)
        )


class IsKirkAdmin(BasePermission):
    def has_permission(self, request, view):
        return (
            request.user.is_authenticated and
            getattr(request.user, 'role', None) == User.ROLE_ADMIN
        )
