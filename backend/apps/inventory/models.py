import uuid

from django.db import models

from apps.catalog.models import Product
from apps.core.models import Warehouse


class WarehouseStock(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="stock_entries")
    warehouse = models.ForeignKey(Warehouse, on_delete=models.PROTECT, related_name="stock_entries")
    stock = models.PositiveIntegerField(default=0)
    min_stock = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "inventory_warehouse_stock"
        ordering = ["warehouse__name"]
        constraints = [
            models.UniqueConstraint(
                fields=["product", "warehouse"],
                name="uq_inventory_stock_product_warehouse",
            )
        ]

    def __str__(self) -> str:
        return f"{self.product.sku} @ {self.warehouse.name}: {self.stock}"

    @property
    def is_low_stock(self) -> bool:
        return self.stock < self.min_stock


class Adjustment(models.Model):
    STATUS_DONE = "done"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    reference = models.CharField(max_length=32, unique=True)
    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        related_name="adjustments",
        blank=True,
        null=True,
    )
    product_name = models.CharField(max_length=255)
    warehouse = models.ForeignKey(Warehouse, on_delete=models.PROTECT, related_name="adjustments")
    old_quantity = models.PositiveIntegerField(default=0)
    new_quantity = models.PositiveIntegerField()
    reason = models.TextField()
    status = models.CharField(max_length=16, default=STATUS_DONE, editable=False)
    date = models.DateTimeField(auto_now_add=True)
    created_by = models.CharField(max_length=255)
    approved_by = models.CharField(max_length=255, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "inventory_adjustment"
        ordering = ["-date", "-reference"]

    def __str__(self) -> str:
        return self.reference

    @property
    def difference(self) -> int:
        return self.new_quantity - self.old_quantity
