"""Process environment exports for drone-bazelisk-ecr."""

import os
from typing import MutableMapping, Optional

from bazeliskecr.constants import AWS_ACCESS_KEY_ENV, AWS_SECRET_KEY_ENV, EXPORT_PREFIX
from bazeliskecr.models import BuildMetadata, PluginConfig


class EnvironmentService:
    """Reads build metadata from, and publishes convenience variables to, an environment mapping."""

    def __init__(self, logger, environ: Optional[MutableMapping[str, str]] = None):
        self.logger = logger
        self.environ = os.environ if environ is None else environ

    def set_with_prefix(self, key: str, value: str):
        self.environ[f"{EXPORT_PREFIX}_{key}"] = value

    def export_convenience(self, config: PluginConfig):
        # read by bazel workspace status scripts
        if config.registry:
            self.set_with_prefix("REGISTRY", config.registry)
        if config.repository:
            self.set_with_prefix("REPOSITORY", config.repository)
        if config.tag:
            self.set_with_prefix("TAG", config.tag)

        # picked up by amazon-ecr-credential-helper when bazel pushes images
        if config.has_credentials:
            self.environ[AWS_ACCESS_KEY_ENV] = config.access_key
            self.environ[AWS_SECRET_KEY_ENV] = config.secret_key
            self.logger.debug("Exported AWS credentials for the ECR credential helper.")

    def build_metadata(self) -> BuildMetadata:
        return BuildMetadata.from_environ(self.environ)

    def snapshot(self):
        return dict(self.environ)
