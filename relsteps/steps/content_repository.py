from __future__ import annotations

from relsteps.core.result import Err
from relsteps.output.console import ConsoleProtocol
from relsteps.steps.capabilities import ServiceDiscovery, SiteBuilder
from relsteps.steps.model import ContentRepositoryArgs, SiteDeployOutcome


def deploy_site(
    args: ContentRepositoryArgs,
    *,
    discovery: ServiceDiscovery,
    site: SiteBuilder,
    console: ConsoleProtocol,
) -> SiteDeployOutcome:
    """Deploy the maven site to the content repository, if there is one.

    The site is not critical to a release: every failure ends up in the
    returned outcome and is never propagated.
    """
    if not args.use_content_repository:
        return SiteDeployOutcome(status="disabled")

    service = args.service_name
    console.print(f"Checking {service} exists")
    found = discovery.has_service(service)
    if isinstance(found, Err):
        console.warning(f"could not look up {service}: {found.error.pretty()}")
        return SiteDeployOutcome(status="no_service", detail=found.error.message)

    if not found.value:
        message = f"no {service} service so not deploying the maven site report"
        console.print(message)
        return SiteDeployOutcome(status="no_service", detail=message)

    deployed = site.build_and_deploy()
    if isinstance(deployed, Err):
        console.warning(f"unable to generate maven site: {deployed.error.pretty()}")
        return SiteDeployOutcome(status="failed", detail=deployed.error.message)

    console.success(f"maven site deployed to {service}")
    return SiteDeployOutcome(status="published")
