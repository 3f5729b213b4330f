import pytest

from updates.errors import MissingVersionError, NotFoundError
from updates.records import VersionRecord
from updates.services import NegotiationEngine, check_for_update
from updates.stats import UpdateStatsTracker
from updates.stores import InMemoryVersionStore


def make_record(**overrides):
    values = dict(
        app="myapp",
        latest_version="1.2.0",
        minimum_version="1.0.0",
        download_url="https://releases.myapp.com/v1.2.0",
        release_notes=("Dark mode",),
        critical=False,
        changelog="https://myapp.com/changelog/v1.2.0",
    )
    values.update(overrides)
    return VersionRecord(**values)


@pytest.fixture
def engine():
    return NegotiationEngine(stats=UpdateStatsTracker())


def test_update_available_not_critical(engine):
    decision = engine.negotiate("myapp", "1.0.0", make_record())

    assert decision.update_available is True
    assert decision.critical is False
    assert decision.download_url == "https://releases.myapp.com/v1.2.0"
    assert decision.release_notes == ("Dark mode",)
    assert decision.changelog == "https://myapp.com/changelog/v1.2.0"
    assert decision.checked_at is not None


def test_client_below_minimum_is_critical(engine):
    decision = engine.negotiate("myapp", "0.9.0", make_record(critical=True))

    assert decision.update_available is True
    assert decision.critical is True


def test_below_minimum_without_critical_flag(engine):
    decision = engine.negotiate("myapp", "0.9.0", make_record(critical=False))
    assert decision.critical is False


def test_up_to_date_client_gets_no_download(engine):
    decision = engine.negotiate("myapp", "1.2.0", make_record(critical=True))

    assert decision.update_available is False
    assert decision.critical is False
    assert decision.download_url is None
    assert decision.release_notes is None
    assert decision.changelog is None
    assert decision.latest_version == "1.2.0"
    assert decision.minimum_version == "1.0.0"


def test_client_ahead_is_never_downgraded(engine):
    decision = engine.negotiate("myapp", "1.3.0-beta.1", make_record())
    assert decision.update_available is False


def test_platform_and_arch_default_to_unknown(engine):
    decision = engine.negotiate("myapp", "1.0.0", make_record())
    assert (decision.platform, decision.arch) == ("unknown", "unknown")

    decision = engine.negotiate("myapp", "1.0.0", make_record(), platform="win32", arch="x64")
    assert (decision.platform, decision.arch) == ("win32", "x64")


def test_unknown_app_leaves_stats_untouched():
    tracker = UpdateStatsTracker()
    engine = NegotiationEngine(stats=tracker)

    with pytest.raises(NotFoundError) as exc:
        engine.negotiate("nope", "1.0.0", None)

    assert exc.value.app_name == "nope"
    snap = tracker.snapshot()
    assert snap.total_checks == 0 and snap.checks_today == 0
    assert snap.version_distribution == ()


def test_missing_version_still_counts_check():
    tracker = UpdateStatsTracker()
    engine = NegotiationEngine(stats=tracker)

    with pytest.raises(MissingVersionError):
        engine.negotiate("myapp", None, make_record())

    snap = tracker.snapshot()
    assert snap.total_checks == 1
    assert snap.checks_today == 1
    assert snap.version_distribution == ()


def test_successful_check_counts_version():
    tracker = UpdateStatsTracker()
    NegotiationEngine(stats=tracker).negotiate("myapp", "1.0.0", make_record())
    assert tracker.snapshot().version_distribution == (("1.0.0", 1),)


def test_empty_app_name_is_rejected(engine):
    with pytest.raises(ValueError):
        engine.negotiate("", "1.0.0", make_record())


def test_default_engine_uses_process_tracker(tracker):
    NegotiationEngine().negotiate("myapp", "1.1.0", make_record())
    assert tracker.snapshot().total_checks == 1


def test_check_for_update_looks_up_store(tracker):
    store = InMemoryVersionStore()

    decision = check_for_update("myapp-beta", "1.2.0", store, platform="linux", client_id="abc")
    assert decision.update_available is True
    assert decision.latest_version == "1.3.0-beta.1"
    assert decision.platform == "linux"

    with pytest.raises(NotFoundError):
        check_for_update("missing", "1.0.0", store)
    assert tracker.snapshot().total_checks == 1


def test_client_with_suffixed_segment_ahead_is_not_offered_older_release(engine):
    decision = engine.negotiate("myapp", "1.3b1", make_record(latest_version="1.2"))

    assert decision.update_available is False
    assert decision.download_url is None
