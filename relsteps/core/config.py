"""Typed loading of the release file (release.toml).

Every value is optional: the file only pre-fills what the CLI does not
override. Values are kept raw here (None when absent) and are validated
once when the release configuration is resolved.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_str_list, get_table

__all__ = [
    "RELEASE_FILE_NAME",
    "ConfigError",
    "ReleaseSection",
    "PromoteSection",
    "DockerSection",
    "CentralSection",
    "SiteSection",
    "ReleaseFile",
    "load_release_file",
]

RELEASE_FILE_NAME = "release.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the release file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseSection:
    project: str | None = None
    version: str | None = None
    repo_ids: tuple[str, ...] | None = None
    container: str | None = None


@dataclass(frozen=True, slots=True)
class PromoteSection:
    helm_push: bool | None = None
    update_next_development_version: bool | None = None
    update_next_development_version_arguments: str | None = None


@dataclass(frozen=True, slots=True)
class DockerSection:
    organisation: str | None = None
    registry: str | None = None
    images: tuple[str, ...] | None = None
    extra_images_to_tag: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class CentralSection:
    group_id: str | None = None
    artifact_id: str | None = None
    extension: str | None = None
    repository: str | None = None


@dataclass(frozen=True, slots=True)
class SiteSection:
    enabled: bool | None = None
    service: str | None = None


@dataclass(frozen=True, slots=True)
class ReleaseFile:
    """Parsed release.toml."""

    release: ReleaseSection = field(default_factory=ReleaseSection)
    promote: PromoteSection = field(default_factory=PromoteSection)
    docker: DockerSection = field(default_factory=DockerSection)
    central: CentralSection = field(default_factory=CentralSection)
    site: SiteSection = field(default_factory=SiteSection)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ReleaseFile:
        release: StrDict = get_table(data, "release") or {}
        promote: StrDict = get_table(data, "promote") or {}
        docker: StrDict = get_table(data, "docker") or {}
        central: StrDict = get_table(data, "central") or {}
        site: StrDict = get_table(data, "site") or {}

        return cls(
            release=ReleaseSection(
                project=get_str(release, "project"),
                version=get_str(release, "version"),
                repo_ids=get_str_list(release, "repo_ids"),
                container=get_str(release, "container"),
            ),
            promote=PromoteSection(
                helm_push=get_bool(promote, "helm_push"),
                update_next_development_version=get_bool(
                    promote, "update_next_development_version"
                ),
                update_next_development_version_arguments=get_str(
                    promote, "update_next_development_version_arguments"
                ),
            ),
            docker=DockerSection(
                organisation=get_str(docker, "organisation"),
                registry=get_str(docker, "registry"),
                images=get_str_list(docker, "images"),
                extra_images_to_tag=get_str_list(docker, "extra_images_to_tag"),
            ),
            central=CentralSection(
                group_id=get_str(central, "group_id"),
                artifact_id=get_str(central, "artifact_id"),
                extension=get_str(central, "extension"),
                repository=get_str(central, "repository"),
            ),
            site=SiteSection(
                enabled=get_bool(site, "enabled"),
                service=get_str(site, "service"),
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Release file root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Release file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except OSError as e:
        return Err(ConfigError(f"Error reading release file: {e}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading release file: {e}", path=path))


def load_release_file(path: Path) -> Result[ReleaseFile, ConfigError]:
    """Load and parse a release file.

    Args:
        path: Path to release.toml

    Returns:
        Ok(ReleaseFile) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(ReleaseFile.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid release file structure: {e}", path=path))
