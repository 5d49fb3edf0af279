from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Supplier",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("is_active", models.BooleanField(default=True)),
                (
                    "supplier_id",
                    models.BigAutoField(primary_key=True, serialize=False),
                ),
                ("supplier_name", models.CharField(max_length=255)),
                (
                    "contact_name",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                ("phone", models.CharField(max_length=32)),
                (
                    "email",
                    models.EmailField(blank=True, max_length=254, null=True),
                ),
                ("address", models.TextField(blank=True, default="")),
            ],
            options={
                "db_table": "suppliers",
                "ordering": ["supplier_id"],
                "indexes": [
                    models.Index(
                        fields=["is_active"], name="suppliers_active_idx"
                    )
                ],
            },
        ),
    ]
