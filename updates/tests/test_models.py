import pytest
from django.core.management import call_command

from updates.models import AppVersion
from updates.tests.factories import AppVersionFactory


@pytest.mark.django_db
def test_app_version_str():
    upd = AppVersionFactory(app="myapp", latest_version="1.2.0", minimum_version="1.0.0")
    assert str(upd) == "myapp 1.2.0 (min 1.0.0)"


@pytest.mark.django_db
def test_to_record_normalizes_empty_changelog():
    upd = AppVersionFactory(changelog="", release_notes=["a", "b"])
    record = upd.to_record()
    assert record.changelog is None
    assert record.release_notes == ("a", "b")
    assert record.app == upd.app


@pytest.mark.django_db
def test_seed_versions_command(capsys):
    call_command("seed_versions")
    assert set(AppVersion.objects.values_list("app", flat=True)) == {"myapp", "myapp-beta"}
    assert "2 release(s) created" in capsys.readouterr().out

    AppVersion.objects.filter(app="myapp").update(latest_version="9.9.9")
    call_command("seed_versions")
    assert AppVersion.objects.get(app="myapp").latest_version == "9.9.9"

    call_command("seed_versions", "--force")
    assert AppVersion.objects.get(app="myapp").latest_version == "1.2.0"
    assert AppVersion.objects.count() == 2
