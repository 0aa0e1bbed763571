"""Collaborator adapters: mvn, gh, docker, kubectl and HTTP probes."""

from .wiring import build_collaborators, build_site_collaborators

__all__ = [
    "build_collaborators",
    "build_site_collaborators",
]
