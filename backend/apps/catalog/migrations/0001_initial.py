import uuid

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("sku", models.CharField(max_length=64, unique=True)),
                (
                    "category",
                    models.CharField(
                        choices=[("raw", "raw"), ("finished", "finished"), ("consumables", "consumables")],
                        max_length=16,
                    ),
                ),
                ("unit_of_measure", models.CharField(max_length=32)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "price",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=12,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "catalog_product",
                "ordering": ["-created_at", "name"],
                "indexes": [
                    models.Index(fields=["category"], name="idx_catalog_product_category"),
                ],
            },
        ),
    ]
