"""
Tests for the adapter protocol, mock adapter and shell command adapter.
"""

import os
import sys
from pathlib import Path

import pytest

from profilekit.adapters.base import WrapperInvocation
from profilekit.adapters.mock import MockAdapter
from profilekit.adapters.shell.command import ShellCommandAdapter
from profilekit.core.models.receipt import Receipt

posix_only = pytest.mark.skipif(os.name == "nt", reason="uses POSIX shell scripts")


def invocation(*argv: str, **kwargs) -> WrapperInvocation:
    return WrapperInvocation(wrapper="test", command=argv[0] if argv else "", argv=list(argv), **kwargs)


class TestWrapperInvocation:
    def test_command_line_quotes(self):
        inv = invocation("git", "commit", "-m", "two words")
        assert inv.command_line == "git commit -m 'two words'"

    def test_defaults(self):
        inv = invocation("git")
        assert inv.capture is True
        assert inv.timeout == 300
        assert inv.cwd is None


class TestReceipt:
    def test_success(self):
        r = Receipt.success(adapter="shell", wrapper="gs", output="clean")
        assert r.ok and not r.failed

    def test_failure(self):
        r = Receipt.failure(adapter="shell", wrapper="gs", error="boom", return_code=2)
        assert r.failed
        assert r.return_code == 2

    def test_skip(self):
        r = Receipt.skip(adapter="shell", wrapper="gs", reason="dry")
        assert r.status == "skipped"
        assert r.output == "dry"


class TestMockAdapter:
    def test_default_success(self):
        mock = MockAdapter(adapter_name="test-mock")
        receipt = mock.execute(invocation("docker", "ps"))
        assert receipt.ok
        assert receipt.adapter == "test-mock"
        assert mock.call_count == 1

    def test_set_failure(self):
        mock = MockAdapter()
        mock.set_failure("test", error="Intentional failure")
        receipt = mock.execute(invocation("docker"))
        assert receipt.failed
        assert "Intentional failure" in receipt.error

    def test_reset(self):
        mock = MockAdapter()
        mock.execute(invocation("docker"))
        mock.reset()
        assert mock.call_count == 0

    def test_argv_for(self):
        mock = MockAdapter()
        mock.execute(invocation("docker", "ps"))
        mock.execute(invocation("docker", "ps", "-a"))
        assert mock.argv_for("test") == [["docker", "ps"], ["docker", "ps", "-a"]]
        assert mock.argv_for("other") == []

    def test_is_available(self):
        assert MockAdapter(available=True).is_available()
        assert not MockAdapter(available=False).is_available()


class TestShellCommandAdapter:
    def test_name_and_availability(self):
        adapter = ShellCommandAdapter()
        assert adapter.name == "shell"
        assert adapter.is_available()

    def test_validate_empty_argv(self):
        valid, msg = ShellCommandAdapter().validate(invocation())
        assert not valid
        assert "Empty" in msg

    def test_validate_bad_cwd(self):
        valid, msg = ShellCommandAdapter().validate(
            invocation("true", cwd="/nonexistent/path"),
        )
        assert not valid
        assert "does not exist" in msg

    def test_execute_captures_output(self, tmp_path: Path):
        receipt = ShellCommandAdapter().execute(
            invocation(sys.executable, "-c", "print('hello')", cwd=str(tmp_path)),
        )
        assert receipt.ok
        assert receipt.output == "hello"
        assert receipt.return_code == 0

    def test_execute_nonzero_exit(self):
        receipt = ShellCommandAdapter().execute(
            invocation(sys.executable, "-c", "import sys; sys.stderr.write('bad'); sys.exit(3)"),
        )
        assert receipt.failed
        assert receipt.return_code == 3
        assert receipt.error == "bad"

    def test_execute_missing_binary(self, tmp_path: Path):
        receipt = ShellCommandAdapter().execute(invocation(str(tmp_path / "ghost")))
        assert receipt.failed
        assert "execution error" in receipt.error

    def test_execute_timeout(self):
        receipt = ShellCommandAdapter().execute(
            invocation(sys.executable, "-c", "import time; time.sleep(5)", timeout=0.2),
        )
        assert receipt.failed
        assert "timed out" in receipt.error

    def test_execute_invalid_cwd_fails(self):
        receipt = ShellCommandAdapter().execute(invocation("true", cwd="/nonexistent/path"))
        assert receipt.failed
        assert "Validation failed" in receipt.error

    @posix_only
    def test_execute_script_from_path(self, bin_dir: Path, make_exe):
        exe = make_exe(bin_dir, "hello-tool", "#!/bin/sh\necho \"args:$*\"\n")
        receipt = ShellCommandAdapter().execute(invocation(str(exe), "a", "b"))
        assert receipt.ok
        assert receipt.output == "args:a b"
