"""
Tests for the profile session — wiring settings into cache and registry.
"""

from pathlib import Path

from profilekit.adapters.mock import MockAdapter
from profilekit.core.models.command import CommandAvailabilityRecord
from profilekit.core.models.fragment import Fragment, WrapperSpec
from profilekit.core.models.settings import ProfileSettings
from profilekit.core.persistence.cache_file import load_snapshot, save_snapshot
from profilekit.core.services.detection.static_probe import StaticProbe
from profilekit.core.session import build_session


def settings_with(**data) -> ProfileSettings:
    return ProfileSettings.model_validate(data)


class TestBuildSession:
    def test_defaults_load_builtin_fragments(self, tmp_path: Path):
        probe = StaticProbe({"git": "/usr/bin/git"})
        session = build_session(root=tmp_path, probe=probe, adapter=MockAdapter())
        assert "git" in session.registry.list_fragments()
        assert session.registry.get("gs") is not None
        assert session.registry.get("dps") is None

    def test_each_command_probed_once(self, tmp_path: Path):
        probe = StaticProbe({"git": "/usr/bin/git"})
        build_session(root=tmp_path, probe=probe, adapter=MockAdapter())
        assert probe.calls_for("git") == 1
        assert probe.calls_for("docker") == 1

    def test_settings_overrides_applied(self, tmp_path: Path):
        settings = settings_with(overrides={"docker": True, "git": False})
        session = build_session(settings, root=tmp_path, probe=StaticProbe({"git": "/usr/bin/git"}))
        assert session.registry.get("dps") is not None
        assert session.registry.get("gs") is None

    def test_assume_beats_settings(self, tmp_path: Path):
        settings = settings_with(overrides={"docker": False})
        session = build_session(
            settings, root=tmp_path, probe=StaticProbe({}), assume={"docker": True},
        )
        assert session.cache.is_available("docker") is True

    def test_builtin_can_be_turned_off(self, tmp_path: Path):
        custom = Fragment(name="inhouse", wrappers=[WrapperSpec(name="deploy", command="inhouse")])
        settings = settings_with(fragments={"builtin": False, "custom": [custom.model_dump()]})
        session = build_session(settings, root=tmp_path, probe=StaticProbe({"inhouse": "/opt/inhouse"}))
        assert session.registry.list_fragments() == ["inhouse"]
        assert session.registry.get("deploy") is not None

    def test_disabled_fragments(self, tmp_path: Path):
        settings = settings_with(fragments={"disabled": ["git"]})
        session = build_session(settings, root=tmp_path, probe=StaticProbe({"git": "/usr/bin/git"}))
        assert session.registry.get("gs") is None
        assert session.registry.status()["git"]["disabled"] is True

    def test_hints_from_settings(self, tmp_path: Path):
        settings = settings_with(hints={"managers": ["brew"], "extra": {"inhouse": "ask ops"}})
        session = build_session(settings, root=tmp_path, probe=StaticProbe({}), load_fragments=False)
        assert session.cache.lookup("docker").install_hint == "brew install --cask docker"
        assert session.cache.lookup("inhouse").install_hint == "ask ops"

    def test_ttl_from_settings(self, tmp_path: Path):
        settings = settings_with(cache={"ttl_seconds": 30})
        session = build_session(settings, root=tmp_path, probe=StaticProbe({}), load_fragments=False)
        assert session.cache.ttl == 30

    def test_no_fragments_when_not_requested(self, tmp_path: Path):
        probe = StaticProbe({})
        session = build_session(root=tmp_path, probe=probe, load_fragments=False)
        assert session.registry.list_fragments() == []
        assert probe.call_count == 0

    def test_sessions_do_not_share_state(self, tmp_path: Path):
        probe = StaticProbe({"git": "/usr/bin/git"})
        a = build_session(root=tmp_path, probe=probe, load_fragments=False)
        b = build_session(root=tmp_path, probe=probe, load_fragments=False)
        a.cache.set_override("git", False)
        assert b.cache.is_available("git") is True

    def test_suppressed_warnings(self, tmp_path: Path):
        settings = settings_with(warnings={"suppress_missing_tools": True})
        session = build_session(settings, root=tmp_path, probe=StaticProbe({}), load_fragments=False)
        assert session.notices.suppressed is True


class TestPersistedSession:
    def test_persist_writes_snapshot(self, tmp_path: Path):
        settings = settings_with(cache={"persist": True})
        session = build_session(settings, root=tmp_path, probe=StaticProbe({"git": "/usr/bin/git"}))
        snapshot = load_snapshot(session.snapshot_path)
        assert snapshot.get("git").available is True
        assert session.snapshot_path == tmp_path / ".state" / "command_cache.json"

    def test_persist_seeds_from_snapshot(self, tmp_path: Path):
        save_snapshot(
            [CommandAvailabilityRecord(name="docker", available=True, path="/usr/bin/docker")],
            tmp_path / ".state" / "command_cache.json",
        )
        probe = StaticProbe({})
        settings = settings_with(cache={"persist": True})
        session = build_session(settings, root=tmp_path, probe=probe)
        assert session.registry.get("dps") is not None
        assert probe.calls_for("docker") == 0

    def test_no_persist_ignores_snapshot(self, tmp_path: Path):
        save_snapshot(
            [CommandAvailabilityRecord(name="docker", available=True)],
            tmp_path / ".state" / "command_cache.json",
        )
        session = build_session(root=tmp_path, probe=StaticProbe({}), load_fragments=False)
        assert session.cache.is_available("docker") is False

    def test_save_cache_counts(self, tmp_path: Path):
        session = build_session(root=tmp_path, probe=StaticProbe({"git": "/usr/bin/git"}), load_fragments=False)
        session.cache.is_available("git")
        assert session.save_cache() == 1
