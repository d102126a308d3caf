import uuid
from datetime import timedelta

from django.conf import settings
from django.db import models
from django.utils import timezone


class HistoryAction(models.TextChoices):
    CREATE = "create", "create"
    UPDATE = "update", "update"
    DELETE = "delete", "delete"
    MOVE = "move", "move"
    VALIDATE = "validate", "validate"


class EntityType(models.TextChoices):
    PRODUCT = "product", "product"
    RECEIPT = "receipt", "receipt"
    DELIVERY = "delivery", "delivery"
    TRANSFER = "transfer", "transfer"
    ADJUSTMENT = "adjustment", "adjustment"
    WAREHOUSE = "warehouse", "warehouse"
    USER = "user", "user"


def retention_cutoff(now=None):
    now = now or timezone.now()
    return now - timedelta(days=getattr(settings, "STOCKOPS_HISTORY_RETENTION_DAYS", 90))


class HistoryEntryQuerySet(models.QuerySet):
    def expired(self, now=None):
        return self.filter(timestamp__lt=retention_cutoff(now))

    def live(self, now=None):
        """Entries still inside the retention window, whether or not a purge has run."""
        return self.filter(timestamp__gte=retention_cutoff(now))


class HistoryEntry(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    action = models.CharField(max_length=16, choices=HistoryAction.choices)
    entity_type = models.CharField(max_length=16, choices=EntityType.choices)
    data = models.JSONField(default=dict)
    actor_name = models.CharField(max_length=255)
    actor_role = models.CharField(max_length=32, blank=True, default="")
    timestamp = models.DateTimeField(default=timezone.now)

    objects = HistoryEntryQuerySet.as_manager()

    class Meta:
        db_table = "history_entry"
        ordering = ["-timestamp"]
        indexes = [
            models.Index(fields=["timestamp"], name="idx_history_timestamp"),
            models.Index(fields=["entity_type"], name="idx_history_entity_type"),
            models.Index(fields=["actor_name"], name="idx_history_actor"),
        ]

    def __str__(self) -> str:
        return f"{self.timestamp:%Y-%m-%d %H:%M} {self.action} {self.entity_type}"
