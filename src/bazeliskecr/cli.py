import logging
import os

import click
from rich.logging import RichHandler

from .constants import DEFAULT_CONFIG_FILE
from .core import BazeliskPlugin, PluginError
from .services.config_loader import ConfigLoader

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_level=False, show_path=False)],
)


@click.command()
@click.option(
    "--config",
    required=False,
    type=click.Path(),
    envvar="PLUGIN_CONFIG_FILE",
    help=f"Path to a YAML file with default settings. Defaults to {DEFAULT_CONFIG_FILE} if present.",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    envvar="PLUGIN_VERBOSE",
    help="Enable verbose logging",
)
@click.option(
    "--log-file",
    type=click.Path(),
    envvar="PLUGIN_LOG_FILE",
    help="Path to log file",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    envvar="PLUGIN_DRY_RUN",
    help="Resolve settings and print the bazel command without creating repositories or running it.",
)
def main(config, verbose, log_file, dry_run):
    """Run a Bazel command as a Drone pipeline step, optionally creating the ECR repository first."""
    logger = logging.getLogger("bazeliskecr")

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)

    resolved_config = config
    if resolved_config is None:
        default_config_path = os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)
        if os.path.exists(default_config_path):
            resolved_config = default_config_path

    try:
        plugin_config = ConfigLoader().load(os.environ, resolved_config)
    except PluginError as exc:
        raise click.ClickException(str(exc)) from exc

    plugin = BazeliskPlugin(config=plugin_config, dry_run=dry_run)
    raise SystemExit(plugin.run())


if __name__ == "__main__":
    main()
