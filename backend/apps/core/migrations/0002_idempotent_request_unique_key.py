from django.db import migrations, models


class Migration(migrations.Migration):
    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.RemoveIndex(
            model_name="idempotentrequest",
            name="idx_core_idem_scope_key",
        ),
        migrations.AddConstraint(
            model_name="idempotentrequest",
            constraint=models.UniqueConstraint(
                fields=("scope", "idempotency_key"),
                name="uq_core_idem_scope_key",
            ),
        ),
    ]
