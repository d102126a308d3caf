from django.conf import settings
from django.http import HttpResponse


class SimpleCORSMiddleware:
    allow_methods = "GET, POST, PUT, PATCH, DELETE, OPTIONS"
    allow_headers = "Content-Type, X-API-Key, Idempotency-Key"
    preflight_max_age = "600"

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        allowed_origin = self._resolve_origin(request.headers.get("Origin"))
        is_preflight = request.method == "OPTIONS" and "Access-Control-Request-Method" in request.headers

        response = HttpResponse(status=200) if is_preflight else self.get_response(request)

        if allowed_origin:
            response["Access-Control-Allow-Origin"] = allowed_origin
            response["Vary"] = "Origin"
            response["Access-Control-Allow-Methods"] = self.allow_methods
            response["Access-Control-Allow-Headers"] = self.allow_headers
            if is_preflight:
                response["Access-Control-Max-Age"] = self.preflight_max_age

        return response

    @staticmethod
    def _resolve_origin(origin: str | None) -> str | None:
        if not origin:
            return None
        if origin in set(getattr(settings, "CORS_ALLOWED_ORIGINS", [])):
            return origin
        if getattr(settings, "DEBUG", False):
            return origin
        return None
