# updates/serializers.py
from rest_framework import serializers


class UpdateCheckQuerySerializer(serializers.Serializer):
    app = serializers.CharField(required=False, allow_blank=True)
    version = serializers.CharField(required=False, allow_blank=True)
    platform = serializers.CharField(required=False, allow_blank=True)
    arch = serializers.CharField(required=False, allow_blank=True)


class DecisionSerializer(serializers.Serializer):
    updateAvailable = serializers.BooleanField(source="update_available")
    critical = serializers.BooleanField()
    currentVersion = serializers.CharField(source="current_version")
    latestVersion = serializers.CharField(source="latest_version")
    releaseDate = serializers.DateTimeField(source="release_date", allow_null=True)
    downloadUrl = serializers.CharField(source="download_url", allow_null=True)
    releaseNotes = serializers.ListField(child=serializers.CharField(), source="release_notes", allow_null=True)
    changelog = serializers.CharField(allow_null=True)
    minimumVersion = serializers.CharField(source="minimum_version")
    checkedAt = serializers.DateTimeField(source="checked_at")
    platform = serializers.CharField()
    arch = serializers.CharField()


class VersionInfoSerializer(serializers.Serializer):
    app = serializers.CharField()
    version = serializers.CharField(source="latest_version")
    releaseDate = serializers.DateTimeField(source="release_date", allow_null=True)
    downloadUrl = serializers.CharField(source="download_url")
    releaseNotes = serializers.ListField(child=serializers.CharField(), source="release_notes")
    minimumVersion = serializers.CharField(source="minimum_version")
    critical = serializers.BooleanField()


class AppSummarySerializer(serializers.Serializer):
    name = serializers.CharField(source="app")
    latestVersion = serializers.CharField(source="latest_version")
    releaseDate = serializers.DateTimeField(source="release_date", allow_null=True)
    critical = serializers.BooleanField()


class PublishSerializer(serializers.Serializer):
    app = serializers.CharField(required=False, max_length=100)
    version = serializers.CharField(max_length=50)
    downloadUrl = serializers.URLField(source="download_url", required=False, allow_blank=True, max_length=500)
    releaseNotes = serializers.ListField(child=serializers.CharField(), source="release_notes", required=False)
    critical = serializers.BooleanField(required=False, default=False)
    minimumVersion = serializers.CharField(source="minimum_version", required=False, allow_blank=True, max_length=50)
    changelog = serializers.CharField(required=False, allow_blank=True)


class RepositorySerializer(serializers.Serializer):
    name = serializers.CharField(required=False, max_length=100)


class WebhookReleaseSerializer(serializers.Serializer):
    repository = RepositorySerializer(required=False)
    version = serializers.CharField(max_length=50)
    download_url = serializers.URLField(required=False, allow_blank=True, max_length=500)
    release_notes = serializers.ListField(child=serializers.CharField(), required=False)
