from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="File",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("name", models.CharField(help_text="Original file name", max_length=255)),
                ("path", models.FileField(help_text="Stored file name", max_length=255, upload_to="")),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
