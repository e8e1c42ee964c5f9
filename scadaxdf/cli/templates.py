"""CLI command to inspect element templates"""

import logging

import click

from jade.loggers import setup_logging
from scadaxdf.cli.common import HANDLED_EXCEPTIONS, exit_on_error
from scadaxdf.config import load_app_config
from scadaxdf.templates import TemplateRegistry


logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "-c", "--config-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Application configuration file. Defaults to the packaged app.toml.",
)
@click.option(
    "-t", "--templates",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Element templates file. Overrides files.templates.",
)
def templates(config_file, templates):
    """Show statistics and warnings for the element templates."""
    setup_logging(__name__, None, packages=["scadaxdf"])
    try:
        if templates is None:
            templates = load_app_config(config_file).files.templates
        registry = TemplateRegistry.from_file(templates)
    except HANDLED_EXCEPTIONS as exc:
        exit_on_error(exc)

    print(f"Templates: {templates}")
    for key, count in registry.stats().items():
        print(f"  {key:<10} {count}")
    warnings = registry.validate()
    for warning in warnings:
        print(f"WARNING: {warning}")
