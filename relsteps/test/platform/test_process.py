"""Tests for relsteps.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path

from relsteps.core.result import Err, Ok
from relsteps.platform.process import ProcessError, run, run_silent


class TestRun:
    def test_captures_stdout(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "print('hello')"], cwd=tmp_path)
        assert isinstance(result, Ok)
        assert result.value.strip() == "hello"

    def test_nonzero_exit(self, tmp_path: Path) -> None:
        code = "import sys; sys.stderr.write('bad'); sys.exit(3)"
        result = run([sys.executable, "-c", code], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == 3
        assert result.error.stderr == "bad"

    def test_missing_command(self, tmp_path: Path) -> None:
        result = run(["relsteps-no-such-command"], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == -1

    def test_timeout(self, tmp_path: Path) -> None:
        code = "import time; time.sleep(5)"
        result = run([sys.executable, "-c", code], cwd=tmp_path, timeout=0.2)
        assert isinstance(result, Err)
        assert "timed out" in result.error.stderr

    def test_cwd(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path)
        assert isinstance(result, Ok)
        assert Path(result.value.strip()).resolve() == tmp_path.resolve()


class TestRunSilent:
    def test_success(self, tmp_path: Path) -> None:
        assert run_silent([sys.executable, "-c", "pass"], cwd=tmp_path) == Ok(None)

    def test_failure(self, tmp_path: Path) -> None:
        result = run_silent([sys.executable, "-c", "raise SystemExit(2)"], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == 2

    def test_missing_command(self, tmp_path: Path) -> None:
        result = run_silent(["relsteps-no-such-command"], cwd=tmp_path)
        assert isinstance(result, Err)


def test_process_error_str() -> None:
    err = ProcessError(command=("mvn", "-B", "site", "deploy"), returncode=1, stdout="", stderr="")
    assert str(err) == "mvn -B site ... failed (exit 1)"
