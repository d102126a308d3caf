from django.conf import settings
from rest_framework import authentication, exceptions

from apps.core.actors import Actor


class ApiKeyAuthentication(authentication.BaseAuthentication):
    header_name = "HTTP_X_API_KEY"

    def authenticate(self, request):
        api_key = request.META.get(self.header_name)
        if not api_key:
            return None

        valid_keys = getattr(settings, "STOCKOPS_API_KEYS", {})
        entry = valid_keys.get(api_key)
        if entry is None:
            raise exceptions.AuthenticationFailed("Invalid API key.")

        return (Actor(name=entry["name"], role=entry["role"]), api_key)

    def authenticate_header(self, request):
        return "X-API-Key"
