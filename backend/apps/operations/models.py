import uuid

from django.core.validators import MinValueValidator
from django.db import models

from apps.catalog.models import Product
from apps.core.models import DocumentType, Warehouse


class OperationStatus(models.TextChoices):
    DRAFT = "draft", "draft"
    WAITING = "waiting", "waiting"
    READY = "ready", "ready"
    DONE = "done", "done"
    CANCELED = "canceled", "canceled"


TERMINAL_STATUSES = frozenset({OperationStatus.DONE, OperationStatus.CANCELED})


class OperationDocument(models.Model):
    document_type = None

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    reference = models.CharField(max_length=32, unique=True)
    status = models.CharField(max_length=16, choices=OperationStatus.choices, default=OperationStatus.DRAFT)
    date = models.DateTimeField(auto_now_add=True)
    notes = models.TextField(blank=True, default="")
    created_by = models.CharField(max_length=255)
    processed_by = models.CharField(max_length=255, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.reference

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES


class OperationLine(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(Product, on_delete=models.SET_NULL, related_name="+", blank=True, null=True)
    product_name = models.CharField(max_length=255)
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit = models.CharField(max_length=32)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        abstract = True
        ordering = ["position"]

    def __str__(self) -> str:
        return f"{self.product_name} x {self.quantity} {self.unit}"


class Receipt(OperationDocument):
    document_type = DocumentType.RECEIPT

    supplier = models.CharField(max_length=255)
    warehouse = models.ForeignKey(Warehouse, on_delete=models.PROTECT, related_name="receipts")

    class Meta(OperationDocument.Meta):
        db_table = "operations_receipt"
        indexes = [
            models.Index(fields=["status"], name="idx_ops_receipt_status"),
        ]


class ReceiptLine(OperationLine):
    receipt = models.ForeignKey(Receipt, on_delete=models.CASCADE, related_name="items")

    class Meta(OperationLine.Meta):
        db_table = "operations_receipt_line"


class Delivery(OperationDocument):
    document_type = DocumentType.DELIVERY

    customer = models.CharField(max_length=255)
    warehouse = models.ForeignKey(Warehouse, on_delete=models.PROTECT, related_name="deliveries")
    shipping_address = models.TextField(blank=True, default="")

    class Meta(OperationDocument.Meta):
        db_table = "operations_delivery"
        verbose_name_plural = "deliveries"
        indexes = [
            models.Index(fields=["status"], name="idx_ops_delivery_status"),
        ]


class DeliveryLine(OperationLine):
    delivery = models.ForeignKey(Delivery, on_delete=models.CASCADE, related_name="items")

    class Meta(OperationLine.Meta):
        db_table = "operations_delivery_line"


class Transfer(OperationDocument):
    document_type = DocumentType.TRANSFER

    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        related_name="transfers",
        blank=True,
        null=True,
    )
    product_name = models.CharField(max_length=255)
    unit = models.CharField(max_length=32, blank=True, default="")
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    from_warehouse = models.ForeignKey(Warehouse, on_delete=models.PROTECT, related_name="outgoing_transfers")
    to_warehouse = models.ForeignKey(Warehouse, on_delete=models.PROTECT, related_name="incoming_transfers")

    class Meta(OperationDocument.Meta):
        db_table = "operations_transfer"
        indexes = [
            models.Index(fields=["status"], name="idx_ops_transfer_status"),
        ]
