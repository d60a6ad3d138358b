"""Amazon ECR repository provisioning for drone-bazelisk-ecr."""

from typing import Any, Dict

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from bazeliskecr.constants import HTTPS_PREFIX, REPOSITORY_EXISTS_CODE
from bazeliskecr.errors import MissingRepositoryName, ProvisioningFailed, RegistryMismatch
from bazeliskecr.errors_catalog import actionable_error
from bazeliskecr.models import PluginConfig, ProvisionOutcome
from bazeliskecr.services.registry import region


class RepositoryService:
    """Ensures the configured ECR repository exists before the build runs."""

    def __init__(self, logger, console, boto3_module=boto3):
        self.logger = logger
        self.console = console
        self.boto3 = boto3_module

    def client(self, config: PluginConfig):
        client_kwargs: Dict[str, Any] = {"region_name": region(config.registry)}
        if config.has_credentials:
            client_kwargs["aws_access_key_id"] = config.access_key
            client_kwargs["aws_secret_access_key"] = config.secret_key

        self.logger.debug("Creating ECR client for region %s", client_kwargs["region_name"])
        return self.boto3.client("ecr", **client_kwargs)

    def authorized_registry(self, ecr_client) -> str:
        try:
            result = ecr_client.get_authorization_token()
        except (ClientError, BotoCoreError) as exc:
            raise ProvisioningFailed(f"Could not fetch ECR authorization data: {exc}") from exc

        authorization_data = result.get("authorizationData") or []
        if not authorization_data:
            raise ProvisioningFailed("ECR returned no authorization data for the provided credentials.")

        url = authorization_data[0].get("proxyEndpoint", "")
        if url.startswith(HTTPS_PREFIX):
            url = url[len(HTTPS_PREFIX):]
        return url

    def validate(self, config: PluginConfig):
        if not config.repository:
            raise MissingRepositoryName(actionable_error("missing_repository"))

    def ensure_repository(self, config: PluginConfig, ecr_client) -> ProvisionOutcome:
        self.validate(config)

        target_registry = self.authorized_registry(ecr_client)
        if config.registry != target_registry:
            raise RegistryMismatch(actionable_error("registry_mismatch", registry=config.registry))

        try:
            ecr_client.create_repository(repositoryName=config.repository)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") == REPOSITORY_EXISTS_CODE:
                self.logger.info("Repository %s already exists.", config.repository)
                return ProvisionOutcome.ALREADY_EXISTS
            raise ProvisioningFailed(
                f"Could not create repository '{config.repository}': {exc}"
            ) from exc
        except BotoCoreError as exc:
            raise ProvisioningFailed(
                f"Could not create repository '{config.repository}': {exc}"
            ) from exc

        self.console.print(f"[green]Created repository {config.repository}.[/green]")
        self.logger.info("Created repository %s in %s", config.repository, config.registry)
        return ProvisionOutcome.CREATED
