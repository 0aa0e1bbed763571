from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

import relsteps.cli.commands.site_cmd as site_cmd
from relsteps.cli.app import app
from relsteps.cli.context import CLIContext
from relsteps.core.config import ReleaseFile, SiteSection
from relsteps.core.result import Err, Ok, Result
from relsteps.output.console import MockConsole
from relsteps.steps.errors import StepError

runner = CliRunner()


class _Discovery:
    def __init__(self, exists: bool) -> None:
        self.exists = exists
        self.asked: list[str] = []

    def has_service(self, name: str) -> Result[bool, StepError]:
        self.asked.append(name)
        return Ok(self.exists)


class _Site:
    def __init__(self, result: Result[None, StepError]) -> None:
        self.result = result
        self.runs = 0

    def build_and_deploy(self) -> Result[None, StepError]:
        self.runs += 1
        return self.result


def _install(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    discovery: _Discovery,
    site: _Site,
    release_file: ReleaseFile | None = None,
) -> MockConsole:
    console = MockConsole()

    def fake_build_context(**_: object) -> CLIContext:
        return CLIContext(
            workspace_root=tmp_path,
            release_file=release_file or ReleaseFile(),
            console=console,
        )

    def fake_build_site_collaborators(**_: object) -> tuple[_Discovery, _Site]:
        return discovery, site

    monkeypatch.setattr(site_cmd, "build_context", fake_build_context)
    monkeypatch.setattr(site_cmd, "build_site_collaborators", fake_build_site_collaborators)
    return console


def test_deploys_when_service_exists(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    discovery = _Discovery(exists=True)
    site = _Site(Ok(None))
    _install(monkeypatch, tmp_path, discovery, site)

    result = runner.invoke(app, ["site", "--service", "docs"])

    assert result.exit_code == 0, result.output
    assert discovery.asked == ["docs"]
    assert site.runs == 1


def test_build_failure_still_exits_zero(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    site = _Site(Err(StepError(kind="command_failed", message="mvn site failed")))
    console = _install(monkeypatch, tmp_path, _Discovery(exists=True), site)

    result = runner.invoke(app, ["site"])

    assert result.exit_code == 0
    assert console.has_warning()


def test_disabled_in_release_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    discovery = _Discovery(exists=True)
    site = _Site(Ok(None))
    console = _install(
        monkeypatch, tmp_path, discovery, site, ReleaseFile(site=SiteSection(enabled=False))
    )

    result = runner.invoke(app, ["site"])

    assert result.exit_code == 0
    assert discovery.asked == []
    assert console.find("content repository disabled")


def test_enable_flag_overrides_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    site = _Site(Ok(None))
    _install(
        monkeypatch,
        tmp_path,
        _Discovery(exists=True),
        site,
        ReleaseFile(site=SiteSection(enabled=False)),
    )

    result = runner.invoke(app, ["site", "--enable"])

    assert result.exit_code == 0
    assert site.runs == 1
