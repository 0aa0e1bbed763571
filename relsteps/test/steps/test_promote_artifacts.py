from __future__ import annotations

from relsteps.core.result import Err, Ok
from relsteps.output.console import MockConsole
from relsteps.steps.model import PromoteArtifactsArgs, PromoteOptions, PullRequestHandle
from relsteps.steps.promote_artifacts import promote_artifacts, release_branch, release_pr_title

from ._fakes import FakeCollaborators, step_error


def _args(*repo_ids: str, **options: object) -> PromoteArtifactsArgs:
    return PromoteArtifactsArgs(
        project="fabric8io/foo",
        version="1.2.3",
        repo_ids=repo_ids,
        options=PromoteOptions(**options),  # type: ignore[arg-type]
    )


def test_branch_and_title_conventions() -> None:
    assert release_branch("1.2.3") == "release-v1.2.3"
    assert release_pr_title("1.2.3") == "[CD] Release 1.2.3"


def test_releases_repos_in_given_order() -> None:
    fake = FakeCollaborators()
    result = promote_artifacts(
        _args("r3", "r1", "r2"), collaborators=fake.bundle(), console=MockConsole()
    )
    assert result == Ok(None)
    assert fake.calls == [("release", "r3"), ("release", "r1"), ("release", "r2")]


def test_failed_release_stops_remaining_repos() -> None:
    failure = step_error("double release")
    fake = FakeCollaborators(fail={"release:r2": failure})

    result = promote_artifacts(
        _args("r1", "r2", "r3", helm_push=True, update_next_development_version=True),
        collaborators=fake.bundle(),
        console=MockConsole(),
    )

    assert result == Err(failure)
    assert fake.calls == [("release", "r1"), ("release", "r2")]


def test_announces_repo_ids() -> None:
    console = MockConsole()
    promote_artifacts(_args("r1"), collaborators=FakeCollaborators().bundle(), console=console)
    assert console.find("About to release fabric8io/foo repo ids ['r1']")


def test_helm_push_runs_after_all_releases() -> None:
    fake = FakeCollaborators()
    promote_artifacts(
        _args("r1", "r2", helm_push=True), collaborators=fake.bundle(), console=MockConsole()
    )
    assert fake.names == ["release", "release", "push"]


def test_helm_push_failure_is_propagated() -> None:
    failure = step_error("helm")
    fake = FakeCollaborators(fail={"push": failure})
    result = promote_artifacts(
        _args("r1", helm_push=True, update_next_development_version=True),
        collaborators=fake.bundle(),
        console=MockConsole(),
    )
    assert result == Err(failure)
    assert "bump" not in fake.names


def test_without_version_bump_returns_no_pull_request() -> None:
    fake = FakeCollaborators()
    result = promote_artifacts(_args("r1"), collaborators=fake.bundle(), console=MockConsole())
    assert result == Ok(None)
    assert "bump" not in fake.names
    assert "create_pr" not in fake.names


def test_version_bump_opens_release_pull_request() -> None:
    fake = FakeCollaborators(pr_id="99")

    result = promote_artifacts(
        _args(
            "r1",
            update_next_development_version=True,
            update_next_development_version_arguments="-Pfoo",
        ),
        collaborators=fake.bundle(),
        console=MockConsole(),
    )

    assert result == Ok(
        PullRequestHandle(
            id="99",
            project="fabric8io/foo",
            url="https://github.com/fabric8io/foo/pull/99",
        )
    )
    assert fake.payloads("bump") == [("1.2.3", "-Pfoo")]
    assert fake.payloads("create_pr") == [
        ("[CD] Release 1.2.3", "fabric8io/foo", "release-v1.2.3")
    ]


def test_missing_bump_arguments_become_empty_string() -> None:
    fake = FakeCollaborators()
    promote_artifacts(
        _args(
            update_next_development_version=True,
            update_next_development_version_arguments=None,
        ),
        collaborators=fake.bundle(),
        console=MockConsole(),
    )
    assert fake.payloads("bump") == [("1.2.3", "")]


def test_bump_failure_skips_pull_request() -> None:
    failure = step_error("versions:set")
    fake = FakeCollaborators(fail={"bump": failure})
    result = promote_artifacts(
        _args("r1", update_next_development_version=True),
        collaborators=fake.bundle(),
        console=MockConsole(),
    )
    assert result == Err(failure)
    assert "create_pr" not in fake.names
