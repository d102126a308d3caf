import uuid

from django.db import models


class Warehouse(models.Model):
    class Type(models.TextChoices):
        MAIN = "main", "main"
        DISTRIBUTION = "distribution", "distribution"
        PRODUCTION = "production", "production"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True)
    location = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=128)
    state = models.CharField(max_length=128)
    zip_code = models.CharField(max_length=32)
    country = models.CharField(max_length=128, default="USA")
    capacity = models.PositiveIntegerField()
    type = models.CharField(max_length=16, choices=Type.choices)
    contact = models.CharField(max_length=255, blank=True, default="")
    phone = models.CharField(max_length=64, blank=True, default="")
    email = models.EmailField(blank=True, default="")
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "core_warehouse"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class DocumentType(models.TextChoices):
    RECEIPT = "receipt", "receipt"
    DELIVERY = "delivery", "delivery"
    TRANSFER = "transfer", "transfer"
    ADJUSTMENT = "adjustment", "adjustment"


DOCUMENT_PREFIXES = {
    DocumentType.RECEIPT: "RCP",
    DocumentType.DELIVERY: "DEL",
    DocumentType.TRANSFER: "TRF",
    DocumentType.ADJUSTMENT: "ADJ",
}


class DocumentSequence(models.Model):
    document_type = models.CharField(max_length=16, choices=DocumentType.choices, unique=True)
    last_value = models.PositiveIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "core_document_sequence"
        ordering = ["document_type"]

    def __str__(self) -> str:
        return f"{self.document_type}:{self.last_value}"


class IdempotentRequest(models.Model):
    class Status(models.TextChoices):
        STARTED = "started", "started"
        COMPLETED = "completed", "completed"
        FAILED = "failed", "failed"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    scope = models.CharField(max_length=64)
    idempotency_key = models.CharField(max_length=255)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.STARTED)
    payload = models.JSONField(default=dict, blank=True)
    result = models.JSONField(default=dict, blank=True)
    started_at = models.DateTimeField(auto_now_add=True)
    finished_at = models.DateTimeField(blank=True, null=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "core_idempotent_request"
        ordering = ["-started_at"]
        constraints = [
            models.UniqueConstraint(fields=["scope", "idempotency_key"], name="uq_core_idem_scope_key"),
        ]

    def __str__(self) -> str:
        return f"{self.scope}:{self.idempotency_key}:{self.status}"
