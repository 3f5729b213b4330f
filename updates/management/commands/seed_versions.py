from django.core.management.base import BaseCommand
from updates.models import AppVersion
from updates.stores import DEFAULT_RELEASES


class Command(BaseCommand):
    help = "Seed the default application releases into the database."

    def add_arguments(self, parser):
        parser.add_argument("--force", action="store_true", help="Overwrite releases that already exist.")

    def handle(self, *args, **opts):
        created_count = 0
        for release in DEFAULT_RELEASES:
            defaults = dict(
                latest_version=release.latest_version,
                minimum_version=release.minimum_version,
                release_date=release.release_date,
                download_url=release.download_url,
                release_notes=list(release.release_notes),
                critical=release.critical,
                changelog=release.changelog,
            )
            if opts["force"]:
                _, created = AppVersion.objects.update_or_create(app=release.app, defaults=defaults)
            else:
                _, created = AppVersion.objects.get_or_create(app=release.app, defaults=defaults)
            created_count += int(created)

        self.stdout.write(self.style.SUCCESS(f"{created_count} release(s) created, {len(DEFAULT_RELEASES)} total."))
