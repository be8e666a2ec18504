from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="LedgerRecord",
            fields=[
                (
                    "key",
                    models.CharField(
                        help_text="Ledger key. For salmon records this is the salmon id.",
                        max_length=255,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("value", models.BinaryField(help_text="Raw stored document bytes.")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "salmon_ledger_records",
                "ordering": ["key"],
            },
        ),
    ]
