import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from jade.utils.utils import load_data


class ScadaXdfBaseModel(BaseModel):
    """Base model for SCADA XDF types."""

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
    )

    @classmethod
    def from_file(cls, filename: Path):
        """Return an instance from a file

        Parameters
        ----------
        filename : Path
            JSON or TOML file

        """
        return cls(**load_data(str(filename)))

    @classmethod
    def schema_json(cls, by_alias: bool = True, indent: int = 2) -> str:
        data = cls.model_json_schema(by_alias=by_alias)
        return json.dumps(data, indent=indent)
