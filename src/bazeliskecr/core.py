import logging
from typing import List, MutableMapping, Optional

import boto3
from rich.console import Console

from .constants import BAZEL_BINARY
from .errors import ExecutionFailed, PluginError
from .models import PluginConfig, ProvisionOutcome
from .services.command_runner import CommandRunner
from .services.environment import EnvironmentService
from .services.invocation import InvocationBuilder
from .services.repository import RepositoryService

console = Console()
logger = logging.getLogger("bazeliskecr")


class BazeliskPlugin:
    def __init__(
        self,
        config: PluginConfig,
        environ: Optional[MutableMapping[str, str]] = None,
        dry_run: bool = False,
        bazel_binary: str = BAZEL_BINARY,
        boto3_module=boto3,
    ):
        self.config = config
        self.dry_run = dry_run
        self.bazel_binary = bazel_binary

        self.environment_service = EnvironmentService(logger=logger, environ=environ)
        self.repository_service = RepositoryService(
            logger=logger,
            console=console,
            boto3_module=boto3_module,
        )
        self.invocation_builder = InvocationBuilder()
        self.command_runner = CommandRunner(logger=logger)

    def provision_repository(self) -> Optional[ProvisionOutcome]:
        if not self.config.create_repository:
            return None

        console.print(f"[blue]Ensuring repository {self.config.repository or '<unset>'} exists...[/blue]")
        self.repository_service.validate(self.config)
        ecr_client = self.repository_service.client(self.config)
        if self.dry_run:
            logger.info("Dry run: skipping repository creation for %s", self.config.repository)
            return None

        return self.repository_service.ensure_repository(self.config, ecr_client)

    def build_command(self) -> List[str]:
        metadata = self.environment_service.build_metadata()
        args = self.invocation_builder.build_args(self.config, metadata)
        return [self.bazel_binary] + args

    def run(self) -> int:
        try:
            logger.info("Starting bazel %s for %s", self.config.command, self.config.target)
            logger.debug("Plugin configuration: %s", self.config)
            self.environment_service.export_convenience(self.config)

            outcome = self.provision_repository()
            if outcome is ProvisionOutcome.ALREADY_EXISTS:
                console.print(f"[dim]Repository {self.config.repository} already exists.[/dim]")

            cmd = self.build_command()
            if self.dry_run:
                console.print("[yellow]Dry run: bazel will not be executed.[/yellow]")
                console.print(" ".join(cmd), markup=False, highlight=False)
                return 0

            return self.command_runner.run(cmd, env=self.environment_service.snapshot())

        except KeyboardInterrupt:
            console.print("[bold red]Operation cancelled by user.[/bold red]")
            logger.info("Operation cancelled by user")
            return 1
        except ExecutionFailed as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            logger.error(str(exc))
            return exc.returncode
        except PluginError as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            logger.error(str(exc))
            return 1
        except Exception as exc:
            console.print(f"[bold red]Unexpected error:[/bold red] {exc}")
            logger.exception("Unexpected error")
            return 1
