"""
Tests for CLI commands — check, run, fragments, cache, health and global options.
"""

import json
import os
import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner

from profilekit.main import cli

posix_only = pytest.mark.skipif(os.name == "nt", reason="uses POSIX shell scripts")


@pytest.fixture
def profile_yml(tmp_path: Path, isolated_path: Path) -> Path:
    """A profile with one custom fragment and the built-ins turned off."""
    content = textwrap.dedent("""\
        name: cli-test
        fragments:
          builtin: false
          custom:
            - name: inhouse
              description: "In-house deploy tool"
              wrappers:
                - name: deploy
                  command: inhouse
                  args: [deploy]
                  aliases: [dep]
        hints:
          extra:
            inhouse: "ask ops for inhouse"
    """)
    config = tmp_path / "profile.yml"
    config.write_text(content)
    return config


def invoke(config: Path, *args: str):
    runner = CliRunner()
    return runner.invoke(cli, ["--config", str(config), *args])


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "availability-aware" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_bad_assume_value(self, profile_yml: Path):
        result = invoke(profile_yml, "--assume", "git=maybe", "check", "git")
        assert result.exit_code == 2
        assert "NAME=yes|no" in result.output

    def test_invalid_config(self, tmp_path: Path):
        config = tmp_path / "profile.yml"
        config.write_text("cache:\n  ttl_seconds: -1\n")
        result = invoke(config, "check", "git")
        assert result.exit_code == 1
        assert "Invalid profile configuration" in result.output


class TestCheckCommand:
    def test_assumed_present(self, profile_yml: Path):
        result = invoke(profile_yml, "--assume", "git=yes", "check", "git")
        assert result.exit_code == 0
        assert "git" in result.output
        assert "override" in result.output

    def test_missing_shows_hint(self, profile_yml: Path):
        result = invoke(profile_yml, "check", "inhouse")
        assert result.exit_code == 0
        assert "ask ops for inhouse" in result.output

    def test_strict_fails_on_missing(self, profile_yml: Path):
        result = invoke(profile_yml, "check", "--strict", "inhouse")
        assert result.exit_code == 1

    def test_json(self, profile_yml: Path):
        result = invoke(profile_yml, "--assume", "git=yes", "--assume", "inhouse=no", "check", "--json", "git", "inhouse")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [(r["name"], r["available"]) for r in data] == [("git", True), ("inhouse", False)]
        assert data[1]["install_hint"] == "ask ops for inhouse"

    @posix_only
    def test_probes_path(self, profile_yml: Path, isolated_path: Path, make_exe):
        exe = make_exe(isolated_path, "inhouse")
        result = invoke(profile_yml, "check", "--strict", "inhouse")
        assert result.exit_code == 0
        assert str(exe) in result.output


class TestRunCommand:
    def test_dry_run_with_alias(self, profile_yml: Path):
        result = invoke(profile_yml, "--assume", "inhouse=yes", "run", "--dry-run", "dep", "prod", "--force")
        assert result.exit_code == 0
        assert "[dry-run] inhouse deploy prod --force" in result.output

    def test_unregistered_wrapper(self, profile_yml: Path):
        result = invoke(profile_yml, "run", "deploy")
        assert result.exit_code == 1
        assert "No wrapper registered for 'deploy'" in result.output

    @posix_only
    def test_runs_tool(self, profile_yml: Path, isolated_path: Path, make_exe):
        make_exe(isolated_path, "inhouse", "#!/bin/sh\necho \"ran:$*\"\n")
        result = invoke(profile_yml, "run", "--capture", "deploy", "staging")
        assert result.exit_code == 0
        assert "ran:deploy staging" in result.output

    @posix_only
    def test_exit_code_propagates(self, profile_yml: Path, isolated_path: Path, make_exe):
        make_exe(isolated_path, "inhouse", "#!/bin/sh\nexit 4\n")
        result = invoke(profile_yml, "run", "--capture", "deploy")
        assert result.exit_code == 4


class TestFragmentsCommands:
    def test_list(self, profile_yml: Path):
        result = invoke(profile_yml, "fragments", "list")
        assert result.exit_code == 0
        assert "0/1 loaded" in result.output
        assert "missing: inhouse" in result.output

    def test_list_json(self, profile_yml: Path):
        result = invoke(profile_yml, "--assume", "inhouse=yes", "fragments", "list", "--json")
        assert result.exit_code == 0
        (entry,) = json.loads(result.output)
        assert entry["fragment"] == "inhouse"
        assert entry["loaded"] is True
        assert entry["aliases"] == ["dep"]

    def test_show(self, profile_yml: Path):
        result = invoke(profile_yml, "fragments", "show", "inhouse")
        assert result.exit_code == 0
        assert "inhouse deploy (dep)" in result.output
        assert "ask ops for inhouse" in result.output

    def test_show_unknown(self, profile_yml: Path):
        result = invoke(profile_yml, "fragments", "show", "nope")
        assert result.exit_code == 1
        assert "Unknown fragment" in result.output

    def test_wrappers(self, profile_yml: Path):
        result = invoke(profile_yml, "--assume", "inhouse=yes", "fragments", "wrappers")
        assert result.exit_code == 0
        assert "deploy [dep] → inhouse deploy" in result.output

    def test_wrappers_none(self, profile_yml: Path):
        result = invoke(profile_yml, "fragments", "wrappers")
        assert result.exit_code == 0
        assert "No wrappers registered" in result.output


class TestCacheCommands:
    @posix_only
    def test_warm_show_verify(self, profile_yml: Path, isolated_path: Path, make_exe):
        exe = make_exe(isolated_path, "inhouse")

        result = invoke(profile_yml, "cache", "warm", "--json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["probed"] == 1
        assert data["available"] == 1
        assert Path(data["path"]).is_file()

        result = invoke(profile_yml, "cache", "show", "--json")
        records = json.loads(result.output)["records"]
        assert records[0]["path"] == str(exe)

        result = invoke(profile_yml, "cache", "verify")
        assert result.exit_code == 0
        assert "matches" in result.output

        exe.unlink()
        result = invoke(profile_yml, "cache", "verify")
        assert result.exit_code == 1
        assert "inhouse: available → missing" in result.output

    def test_show_without_snapshot(self, profile_yml: Path):
        result = invoke(profile_yml, "cache", "show")
        assert result.exit_code == 0
        assert "No snapshot" in result.output

    def test_clear(self, profile_yml: Path):
        invoke(profile_yml, "cache", "warm")
        snapshot = profile_yml.parent / ".state" / "command_cache.json"
        assert snapshot.is_file()

        result = invoke(profile_yml, "cache", "clear")
        assert result.exit_code == 0
        assert "Removed" in result.output
        assert not snapshot.exists()

        result = invoke(profile_yml, "cache", "clear")
        assert "Nothing to clear" in result.output

    @posix_only
    def test_clear_drops_stale_persisted_answer(self, profile_yml: Path, isolated_path: Path, make_exe):
        profile_yml.write_text(profile_yml.read_text() + "cache:\n  persist: true\n")
        invoke(profile_yml, "cache", "warm")
        make_exe(isolated_path, "inhouse")

        # The persisted "missing" answer is reused until the snapshot goes
        assert invoke(profile_yml, "check", "--strict", "inhouse").exit_code == 1
        invoke(profile_yml, "cache", "clear")
        assert invoke(profile_yml, "check", "--strict", "inhouse").exit_code == 0

    def test_assumed_records_not_saved(self, profile_yml: Path):
        invoke(profile_yml, "--assume", "inhouse=yes", "cache", "warm")
        result = invoke(profile_yml, "cache", "show", "--json")
        assert json.loads(result.output)["records"] == []


class TestHealthCommand:
    def test_healthy_json(self, profile_yml: Path):
        result = invoke(profile_yml, "--assume", "inhouse=yes", "health", "--json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["status"] == "healthy"
        assert {c["name"] for c in data["components"]} == {"command_cache", "fragments"}

    def test_unhealthy_exits_nonzero(self, profile_yml: Path):
        result = invoke(profile_yml, "health")
        assert result.exit_code == 1
        assert "UNHEALTHY" in result.output
