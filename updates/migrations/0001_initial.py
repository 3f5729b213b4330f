import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AppVersion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("app", models.CharField(help_text="e.g., myapp", max_length=100, unique=True)),
                ("latest_version", models.CharField(help_text="e.g., 1.2.0", max_length=50)),
                ("minimum_version", models.CharField(help_text="clients below this are critical when flagged", max_length=50)),
                ("release_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("download_url", models.URLField(blank=True, default="", max_length=500)),
                ("release_notes", models.JSONField(blank=True, default=list)),
                ("critical", models.BooleanField(default=False, help_text="force clients below minimum_version to update")),
                ("changelog", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "App Version",
                "verbose_name_plural": "App Versions",
                "ordering": ["app"],
            },
        ),
    ]
