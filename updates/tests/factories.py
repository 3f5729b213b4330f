import factory

from updates.models import AppVersion


class AppVersionFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = AppVersion
        django_get_or_create = ("app",)

    app = factory.Sequence(lambda n: f"app{n}")
    latest_version = "1.2.0"
    minimum_version = "1.0.0"
    download_url = factory.LazyAttribute(lambda o: f"https://releases.example.com/{o.app}/v{o.latest_version}")
    release_notes = factory.LazyFunction(lambda: ["Bug fixes", "Faster sync"])
    critical = False
    changelog = factory.LazyAttribute(lambda o: f"https://example.com/{o.app}/changelog")
