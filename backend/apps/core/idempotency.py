import json

from django.db import transaction
from django.utils import timezone

from apps.core.exceptions import IdempotencyConflict
from apps.core.models import IdempotentRequest


def normalize_payload(data):
    return json.loads(json.dumps(data, default=str))


def claim_request(scope: str, idempotency_key: str, payload) -> IdempotentRequest:
    """Reserve ``idempotency_key`` for this request or return the finished record to replay.

    The (scope, key) pair is unique, so a concurrent duplicate either waits on
    the row lock or loses the insert and lands on the existing record.
    """
    payload = normalize_payload(payload)
    with transaction.atomic():
        record, created = IdempotentRequest.objects.select_for_update().get_or_create(
            scope=scope,
            idempotency_key=idempotency_key,
            defaults={"status": IdempotentRequest.Status.STARTED, "payload": payload},
        )
        if created:
            return record

        if record.status == IdempotentRequest.Status.FAILED:
            record.status = IdempotentRequest.Status.STARTED
            record.payload = payload
            record.result = {}
            record.finished_at = None
            record.save(update_fields=["status", "payload", "result", "finished_at", "updated_at"])
            return record

        if record.payload != payload:
            raise IdempotencyConflict(f"Idempotency-Key '{idempotency_key}' was already used with a different body.")
        if record.status == IdempotentRequest.Status.STARTED:
            raise IdempotencyConflict(f"A request with Idempotency-Key '{idempotency_key}' is still in progress.")
        return record


def complete_request(record: IdempotentRequest, status_code: int, data):
    record.status = IdempotentRequest.Status.COMPLETED
    record.finished_at = timezone.now()
    record.result = {
        "status_code": status_code,
        "data": normalize_payload(data),
    }
    record.save(update_fields=["status", "finished_at", "result", "updated_at"])


def fail_request(record: IdempotentRequest, status_code: int, errors):
    record.status = IdempotentRequest.Status.FAILED
    record.finished_at = timezone.now()
    record.result = {
        "status_code": status_code,
        "errors": normalize_payload(errors),
    }
    record.save(update_fields=["status", "finished_at", "result", "updated_at"])
