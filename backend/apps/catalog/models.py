import uuid

from django.core.validators import MinValueValidator
from django.db import models


class Product(models.Model):
    class Category(models.TextChoices):
        RAW = "raw", "raw"
        FINISHED = "finished", "finished"
        CONSUMABLES = "consumables", "consumables"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    sku = models.CharField(max_length=64, unique=True)
    category = models.CharField(max_length=16, choices=Category.choices)
    unit_of_measure = models.CharField(max_length=32)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        blank=True,
        null=True,
        validators=[MinValueValidator(0)],
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "catalog_product"
        ordering = ["-created_at", "name"]
        indexes = [
            models.Index(fields=["category"], name="idx_catalog_product_category"),
        ]

    def __str__(self) -> str:
        return f"{self.sku} - {self.name}"
