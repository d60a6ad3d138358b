"""Registry hostname helpers for drone-bazelisk-ecr."""

from bazeliskecr.errors import MalformedRegistryHost
from bazeliskecr.errors_catalog import actionable_error


def region(registry_host: str) -> str:
    """Return the AWS region embedded in an ECR registry hostname.

    ECR hostnames look like ``<account>.dkr.ecr.<region>.amazonaws.com``; the
    region is the fourth dot-separated segment. The segment itself is not
    checked against the list of known regions.
    """
    segments = registry_host.split(".")
    if len(segments) < 4:
        raise MalformedRegistryHost(actionable_error("malformed_registry", registry=registry_host))
    return segments[3]
