import uuid

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="HistoryEntry",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "action",
                    models.CharField(
                        choices=[
                            ("create", "create"),
                            ("update", "update"),
                            ("delete", "delete"),
                            ("move", "move"),
                            ("validate", "validate"),
                        ],
                        max_length=16,
                    ),
                ),
                (
                    "entity_type",
                    models.CharField(
                        choices=[
                            ("product", "product"),
                            ("receipt", "receipt"),
                            ("delivery", "delivery"),
                            ("transfer", "transfer"),
                            ("adjustment", "adjustment"),
                            ("warehouse", "warehouse"),
                            ("user", "user"),
                        ],
                        max_length=16,
                    ),
                ),
                ("data", models.JSONField(default=dict)),
                ("actor_name", models.CharField(max_length=255)),
                ("actor_role", models.CharField(blank=True, default="", max_length=32)),
                ("timestamp", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "history_entry",
                "ordering": ["-timestamp"],
                "indexes": [
                    models.Index(fields=["timestamp"], name="idx_history_timestamp"),
                    models.Index(fields=["entity_type"], name="idx_history_entity_type"),
                    models.Index(fields=["actor_name"], name="idx_history_actor"),
                ],
            },
        ),
    ]
