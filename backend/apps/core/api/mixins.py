from rest_framework import status
from rest_framework.response import Response

from apps.core.idempotency import claim_request, complete_request, fail_request
from apps.core.models import IdempotentRequest


class IdempotentCreateMixin:
    """Replays the first response when a create request repeats its Idempotency-Key header."""

    idempotency_scope = None

    def create(self, request, *args, **kwargs):
        idempotency_key = request.headers.get("Idempotency-Key")
        if not idempotency_key:
            return super().create(request, *args, **kwargs)

        record = claim_request(self.idempotency_scope, idempotency_key, request.data)
        if record.status == IdempotentRequest.Status.COMPLETED:
            result = record.result or {}
            return Response(result.get("data", {}), status=result.get("status_code", status.HTTP_200_OK))

        try:
            response = super().create(request, *args, **kwargs)
        except Exception as exc:
            fail_request(
                record,
                getattr(exc, "status_code", status.HTTP_500_INTERNAL_SERVER_ERROR),
                {"detail": str(exc)},
            )
            raise
        complete_request(record, response.status_code, response.data)
        return response
