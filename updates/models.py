# updates/models.py

from django.db import models
from django.utils import timezone

from .records import VersionRecord


class AppVersion(models.Model):
    app = models.CharField(max_length=100, unique=True, help_text="e.g., myapp")
    latest_version = models.CharField(max_length=50, help_text="e.g., 1.2.0")
    minimum_version = models.CharField(max_length=50, help_text="clients below this are critical when flagged")
    release_date = models.DateTimeField(default=timezone.now)
    download_url = models.URLField(max_length=500, blank=True, default="")
    release_notes = models.JSONField(default=list, blank=True)
    critical = models.BooleanField(default=False, help_text="force clients below minimum_version to update")
    changelog = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['app']
        verbose_name = "App Version"
        verbose_name_plural = "App Versions"

    def __str__(self):
        return f"{self.app} {self.latest_version} (min {self.minimum_version})"

    def to_record(self) -> VersionRecord:
        return VersionRecord(
            app=self.app,
            latest_version=self.latest_version,
            minimum_version=self.minimum_version,
            release_date=self.release_date,
            download_url=self.download_url,
            release_notes=tuple(self.release_notes or ()),
            critical=self.critical,
            changelog=self.changelog or None,
        )
