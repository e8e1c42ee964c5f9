"""CLI command to show the effective configuration"""

import click
import toml

from jade.loggers import setup_logging
from scadaxdf.cli.common import HANDLED_EXCEPTIONS, exit_on_error
from scadaxdf.config import load_app_config


@click.command()
@click.option(
    "-c", "--config-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Application configuration file. Defaults to the packaged app.toml.",
)
def show_config(config_file):
    """Print the effective configuration as TOML."""
    setup_logging(__name__, None, packages=["scadaxdf"])
    try:
        config = load_app_config(config_file)
    except HANDLED_EXCEPTIONS as exc:
        exit_on_error(exc)
    print(toml.dumps(config.model_dump()))
