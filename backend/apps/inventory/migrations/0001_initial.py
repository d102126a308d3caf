import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("catalog", "0001_initial"),
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="WarehouseStock",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("stock", models.PositiveIntegerField(default=0)),
                ("min_stock", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="stock_entries",
                        to="catalog.product",
                    ),
                ),
                (
                    "warehouse",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="stock_entries",
                        to="core.warehouse",
                    ),
                ),
            ],
            options={
                "db_table": "inventory_warehouse_stock",
                "ordering": ["warehouse__name"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("product", "warehouse"),
                        name="uq_inventory_stock_product_warehouse",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Adjustment",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("reference", models.CharField(max_length=32, unique=True)),
                ("product_name", models.CharField(max_length=255)),
                ("old_quantity", models.PositiveIntegerField(default=0)),
                ("new_quantity", models.PositiveIntegerField()),
                ("reason", models.TextField()),
                ("status", models.CharField(default="done", editable=False, max_length=16)),
                ("date", models.DateTimeField(auto_now_add=True)),
                ("created_by", models.CharField(max_length=255)),
                ("approved_by", models.CharField(blank=True, default="", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "product",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="adjustments",
                        to="catalog.product",
                    ),
                ),
                (
                    "warehouse",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="adjustments",
                        to="core.warehouse",
                    ),
                ),
            ],
            options={
                "db_table": "inventory_adjustment",
                "ordering": ["-date", "-reference"],
            },
        ),
    ]
