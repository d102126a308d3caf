import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models

STATUS_CHOICES = [
    ("draft", "draft"),
    ("waiting", "waiting"),
    ("ready", "ready"),
    ("done", "done"),
    ("canceled", "canceled"),
]


def document_fields():
    return [
        ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
        ("reference", models.CharField(max_length=32, unique=True)),
        ("status", models.CharField(choices=STATUS_CHOICES, default="draft", max_length=16)),
        ("date", models.DateTimeField(auto_now_add=True)),
        ("notes", models.TextField(blank=True, default="")),
        ("created_by", models.CharField(max_length=255)),
        ("processed_by", models.CharField(blank=True, default="", max_length=255)),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
    ]


def line_fields():
    return [
        ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
        (
            "product",
            models.ForeignKey(
                blank=True,
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="+",
                to="catalog.product",
            ),
        ),
        ("product_name", models.CharField(max_length=255)),
        ("quantity", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
        ("unit", models.CharField(max_length=32)),
        ("position", models.PositiveIntegerField(default=0)),
    ]


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("catalog", "0001_initial"),
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Receipt",
            fields=document_fields()
            + [
                ("supplier", models.CharField(max_length=255)),
                (
                    "warehouse",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="receipts",
                        to="core.warehouse",
                    ),
                ),
            ],
            options={
                "db_table": "operations_receipt",
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [models.Index(fields=["status"], name="idx_ops_receipt_status")],
            },
        ),
        migrations.CreateModel(
            name="ReceiptLine",
            fields=line_fields()
            + [
                (
                    "receipt",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="operations.receipt",
                    ),
                ),
            ],
            options={
                "db_table": "operations_receipt_line",
                "ordering": ["position"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Delivery",
            fields=document_fields()
            + [
                ("customer", models.CharField(max_length=255)),
                ("shipping_address", models.TextField(blank=True, default="")),
                (
                    "warehouse",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="deliveries",
                        to="core.warehouse",
                    ),
                ),
            ],
            options={
                "db_table": "operations_delivery",
                "verbose_name_plural": "deliveries",
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [models.Index(fields=["status"], name="idx_ops_delivery_status")],
            },
        ),
        migrations.CreateModel(
            name="DeliveryLine",
            fields=line_fields()
            + [
                (
                    "delivery",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="operations.delivery",
                    ),
                ),
            ],
            options={
                "db_table": "operations_delivery_line",
                "ordering": ["position"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Transfer",
            fields=document_fields()
            + [
                ("product_name", models.CharField(max_length=255)),
                ("unit", models.CharField(blank=True, default="", max_length=32)),
                ("quantity", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                (
                    "product",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="transfers",
                        to="catalog.product",
                    ),
                ),
                (
                    "from_warehouse",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="outgoing_transfers",
                        to="core.warehouse",
                    ),
                ),
                (
                    "to_warehouse",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="incoming_transfers",
                        to="core.warehouse",
                    ),
                ),
            ],
            options={
                "db_table": "operations_transfer",
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [models.Index(fields=["status"], name="idx_ops_transfer_status")],
            },
        ),
    ]
