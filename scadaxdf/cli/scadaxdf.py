"""Main CLI command for scadaxdf."""

import logging

import click

from scadaxdf.cli.generate import generate
from scadaxdf.cli.show_config import show_config
from scadaxdf.cli.templates import templates


logger = logging.getLogger(__name__)


@click.group()
def cli():
    """Entry point"""


cli.add_command(generate)
cli.add_command(templates)
cli.add_command(show_config)
