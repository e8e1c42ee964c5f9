"""CLI command to generate XDF documents from a signal table"""

import logging
from pathlib import Path

import click

from jade.exceptions import InvalidParameter
from jade.loggers import setup_logging
from jade.utils.utils import get_cli_string
from scadaxdf.cli.common import HANDLED_EXCEPTIONS, exit_on_error
from scadaxdf.common import LOG_FILENAME
from scadaxdf.config import load_app_config
from scadaxdf.sources.tabular import add_station_columns, parse_station_path, read_table
from scadaxdf.xdf.generator import XdfGenerator


logger = logging.getLogger(__name__)


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
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
@click.option(
    "-d", "--dasip",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="DASIP mapping file. Overrides files.dasip_mapping.",
)
@click.option(
    "-o", "--output",
    type=click.Path(file_okay=False),
    default=None,
    help="Output directory. Overrides files.output_dir.",
)
@click.option(
    "-s", "--station-path",
    type=click.STRING,
    default=None,
    help="EMPRESA/REGION/B1/B2/B3 of a table exported without station columns",
)
@click.option(
    "-a", "--aor",
    type=click.STRING,
    default=None,
    help="Area of responsibility stamped together with --station-path",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    default=False,
    help="Enable debug logging",
)
def generate(input_file, config_file, templates, dasip, output, station_path, aor, verbose):
    """Generate the addressing and network-model documents of a station."""
    level = logging.DEBUG if verbose else logging.INFO
    setup_logging("scadaxdf", LOG_FILENAME, console_level=level, file_level=level, packages=["scadaxdf"])
    logger.info(get_cli_string())

    if (station_path is None) != (aor is None):
        raise click.BadParameter("--station-path and --aor must be passed together")

    try:
        config = load_app_config(config_file)
        extension = Path(input_file).suffix
        if not config.is_format_supported(extension):
            raise InvalidParameter(f"{extension} is not one of {config.files.supported_input_formats}")

        table = read_table(input_file)
        if station_path is not None:
            empresa, region, _, _, _ = parse_station_path(station_path)
            table = add_station_columns(table, empresa, region, aor)

        generator = XdfGenerator.from_config(config, templates_file=templates, dasip_file=dasip)
        result = generator.generate(table.header_map, table.rows)
        output_dir = output or config.files.output_dir
        filenames = generator.write(result, output_dir, output_config=config.output)
    except HANDLED_EXCEPTIONS as exc:
        exit_on_error(exc)

    for warning in result.warnings:
        print(f"WARNING: {warning}")
    if not filenames:
        print(f"No documents generated from {input_file}.")
    for filename in filenames:
        print(f"Generated {filename}")
