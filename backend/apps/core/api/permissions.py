from rest_framework.permissions import BasePermission

from apps.core.roles import role_has_permission


class HasValidApiKey(BasePermission):
    message = "A valid X-API-Key header is required."

    def has_permission(self, request, view):
        if request.method == "OPTIONS":
            return True
        return bool(request.auth)


class HasRolePermission(BasePermission):
    """Checks ``view.required_permissions``, keyed by viewset action or HTTP method."""

    message = "Your role does not allow this action."

    def has_permission(self, request, view):
        if request.method == "OPTIONS":
            return True
        required = self._required_permission(request, view)
        if required is None:
            return True
        return role_has_permission(getattr(request.user, "role", None), required)

    @staticmethod
    def _required_permission(request, view):
        permission_map = getattr(view, "required_permissions", None) or {}
        action = getattr(view, "action", None)
        if action and action in permission_map:
            return permission_map[action]
        return permission_map.get(request.method.lower())
