from pathlib import Path

import click

from scadaxdf.config import AppConfig, DasipConfig
from scadaxdf.models.elements import Analog, Breaker, Discrete, IfsPoint


@click.command()
@click.argument("output-dir", callback=lambda _, __, x: Path(x))
def generate_schemas(output_dir):
    """Write the JSON schemas of the configuration and template files."""
    output_dir.mkdir(exist_ok=True, parents=True)
    for model in (
        AppConfig,
        DasipConfig,
        Analog,
        Discrete,
        Breaker,
        IfsPoint,
    ):
        filename = output_dir / (model.__name__ + ".json")
        with open(str(filename), "w") as f_out:
            f_out.write(model.schema_json(indent=2))
            print(f"Generated {filename}")


if __name__ == "__main__":
    generate_schemas()
