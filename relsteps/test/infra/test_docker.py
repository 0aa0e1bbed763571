from __future__ import annotations

from pathlib import Path

import pytest

from relsteps.core.result import Err, Ok
from relsteps.infra.docker import DockerImagePromoter, DockerImageTagger
from relsteps.steps.model import PromoteImagesArgs, TagImagesArgs

from ._process_fakes import FakeProcesses, patched_runner


def test_promote_copies_each_image_to_registry(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    runner, _, fake = patched_runner(monkeypatch, tmp_path)
    args = PromoteImagesArgs(tag="1.0", org="fabric8", to_registry="docker.io", images=("a", "b"))

    assert DockerImagePromoter(runner).promote(args) == Ok(None)

    assert fake.commands[:3] == [
        ["docker", "pull", "fabric8/a:1.0"],
        ["docker", "tag", "fabric8/a:1.0", "docker.io/fabric8/a:1.0"],
        ["docker", "push", "docker.io/fabric8/a:1.0"],
    ]
    assert len(fake.commands) == 6


def test_promote_stops_on_first_failure(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    fake = FakeProcesses(fail_on=lambda cmd: "denied" if cmd[1] == "push" else None)
    runner, _, _ = patched_runner(monkeypatch, tmp_path, fake=fake)
    args = PromoteImagesArgs(tag="1.0", org="o", to_registry="r", images=("a", "b"))

    result = DockerImagePromoter(runner).promote(args)

    assert isinstance(result, Err)
    assert result.error.kind == "image_promotion_failed"
    assert result.error.hint == "denied"
    assert len(fake.commands) == 3


def test_tag_points_latest_at_release(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    runner, _, fake = patched_runner(monkeypatch, tmp_path)

    assert DockerImageTagger(runner).tag(TagImagesArgs(tag="2.0", images=("x",))) == Ok(None)

    assert fake.commands == [
        ["docker", "pull", "x:2.0"],
        ["docker", "tag", "x:2.0", "x:latest"],
        ["docker", "push", "x:latest"],
    ]


def test_tag_failure_kind(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    fake = FakeProcesses(fail_on=lambda cmd: "missing")
    runner, _, _ = patched_runner(monkeypatch, tmp_path, fake=fake)
    result = DockerImageTagger(runner).tag(TagImagesArgs(tag="2.0", images=("x",)))
    assert isinstance(result, Err)
    assert result.error.kind == "image_tag_failed"
