from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="StoredValue",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("namespace", models.CharField(db_index=True, max_length=255)),
                ("key", models.CharField(max_length=255)),
                ("value", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "unique_together": {("namespace", "key")},
            },
        ),
    ]
