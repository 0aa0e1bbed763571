"""Release steps: promote artifacts, deploy the site, release a project."""

from .content_repository import deploy_site
from .errors import StepError
from .model import ReleaseConfig
from .promote_artifacts import promote_artifacts
from .release_project import release_project

__all__ = [
    "StepError",
    "ReleaseConfig",
    "deploy_site",
    "promote_artifacts",
    "release_project",
]
