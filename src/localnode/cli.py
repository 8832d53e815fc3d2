import logging
import os

import click
from rich.logging import RichHandler

from .constants import DEFAULT_HOST, DEFAULT_WORK_DIR
from .core import LocalNode, LocalNodeError
from .services.config_loader import ConfigLoader


def _resolve_option(cli_value, config, key, default=None):
    if cli_value is not None:
        return cli_value
    if key in config:
        return config[key]
    return default


logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_level=False, show_path=False)],
)


_RUN_OPTIONS = (
    click.option(
        "--network",
        "-n",
        required=False,
        type=click.Choice(LocalNode.VALID_NETWORKS),
        help="Network whose image tags and settings are used (default: local).",
    ),
    click.option(
        "--workdir",
        required=False,
        type=click.Path(file_okay=False),
        help=f"Working directory for generated configuration and logs (default: {DEFAULT_WORK_DIR}).",
    ),
    click.option(
        "--multinode/--no-multinode",
        default=None,
        help="Run four consensus nodes instead of one.",
    ),
    click.option(
        "--full/--turbo",
        default=None,
        help="Full mode uploads record streams like a real network; turbo reads them locally.",
    ),
    click.option(
        "--limits/--no-limits",
        default=None,
        help="Enable or disable the JSON-RPC relay rate limits (default: enabled).",
    ),
    click.option(
        "--enable-debug",
        is_flag=True,
        default=None,
        help="Point the mirror node importer at the local debug downloader.",
    ),
    click.option("--host", required=False, help=f"Host of the running services (default: {DEFAULT_HOST})."),
    click.option("--dev", is_flag=True, default=None, help="Enable developer mode."),
    click.option("--verbose", is_flag=True, default=None, help="Enable verbose logging"),
    click.option("--log-file", type=click.Path(), help="Path to log file"),
    click.option(
        "--config",
        required=False,
        type=click.Path(),
        help="Path to a YAML configuration file. Defaults to .localnode.yml if present.",
    ),
)


def run_options(func):
    for option in reversed(_RUN_OPTIONS):
        func = option(func)
    return func


def _execute(command, **cli_values):
    logger = logging.getLogger("localnode")

    try:
        config_loader = ConfigLoader()
        resolved_config = cli_values["config"]
        if resolved_config is None:
            default_config_path = os.path.join(os.getcwd(), ".localnode.yml")
            if os.path.exists(default_config_path):
                resolved_config = default_config_path

        config_values = config_loader.load(resolved_config)
    except LocalNodeError as exc:
        raise click.ClickException(str(exc)) from exc

    network = _resolve_option(cli_values["network"], config_values, "network", default="local")
    work_dir = _resolve_option(cli_values["workdir"], config_values, "workdir", default=DEFAULT_WORK_DIR)
    multi_node = _resolve_option(cli_values["multinode"], config_values, "multinode", default=False)
    full_mode = _resolve_option(cli_values["full"], config_values, "full", default=False)
    limits = _resolve_option(cli_values["limits"], config_values, "limits", default=True)
    enable_debug = _resolve_option(cli_values["enable_debug"], config_values, "debug", default=False)
    host = str(_resolve_option(cli_values["host"], config_values, "host", default=DEFAULT_HOST))
    dev_mode = _resolve_option(cli_values["dev"], config_values, "dev", default=False)
    verbose = _resolve_option(cli_values["verbose"], config_values, "verbose", default=False)
    log_file = _resolve_option(cli_values["log_file"], config_values, "log_file")

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(file_handler)

    try:
        local_node = LocalNode(
            network=str(network),
            work_dir=str(work_dir),
            multi_node=multi_node,
            enable_debug=enable_debug,
            full_mode=full_mode,
            limits=limits,
            host=host,
            dev_mode=dev_mode,
        )
    except LocalNodeError as exc:
        raise click.ClickException(str(exc)) from exc

    raise SystemExit(local_node.run(command))


@click.group()
def main():
    """Run a local consensus node, mirror node and JSON-RPC relay on Docker."""


@main.command()
@run_options
def start(**cli_values):
    """Prepare the working directory and start the local network."""
    _execute("start", **cli_values)


@main.command()
@run_options
def stop(**cli_values):
    """Stop the local network and remove ephemeral data."""
    _execute("stop", **cli_values)


@main.command()
@run_options
def restart(**cli_values):
    """Stop, re-prepare and start the local network."""
    _execute("restart", **cli_values)


if __name__ == "__main__":
    main()
