"""Application and DASIP configuration models."""

import logging
from pathlib import Path
from typing import Dict, List

from pydantic import Field, field_validator

from jade.exceptions import InvalidConfiguration
from jade.utils.utils import load_data
from scadaxdf.common import (
    DEFAULT_DASIP_PATH,
    DEFAULT_XML_INDENT,
    DEFAULT_XML_LANG,
    DEFAULT_XML_VERSION,
    OPTIONAL_COLUMNS,
    REQUIRED_COLUMNS,
)
from scadaxdf.enums import DocumentKind, TabularFormat
from scadaxdf.models.base import ScadaXdfBaseModel


logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).parent
DEFAULT_CONFIG_FILE = CONFIG_DIR / "app.toml"
DEFAULT_DASIP_FILE = CONFIG_DIR / "dasip.toml"
DEFAULT_TEMPLATES_FILE = CONFIG_DIR / "templates.json"


class FilesConfig(ScadaXdfBaseModel):
    """Locations of input data and generated documents"""

    templates: str = Field(
        title="templates",
        description="Path to the element templates file (JSON or TOML).",
        min_length=1,
    )
    dasip_mapping: str = Field(
        title="dasip_mapping",
        description="Path to the DASIP mapping file.",
        min_length=1,
    )
    output_dir: str = Field(
        title="output_dir",
        description="Directory where XDF documents are written.",
        default="output",
    )
    supported_input_formats: List[str] = Field(
        title="supported_input_formats",
        description="File extensions accepted as input tables.",
        default=[x.value for x in TabularFormat],
    )


class XmlConfig(ScadaXdfBaseModel):
    """Attributes and layout of rendered documents"""

    lang: str = Field(
        title="lang",
        description="Value of the xml:lang attribute of the XDF root.",
        default=DEFAULT_XML_LANG,
    )
    version: str = Field(
        title="version",
        description="Value of the XdfTypeSyntaxVersion attribute of the XDF root.",
        default=DEFAULT_XML_VERSION,
    )
    indent: str = Field(
        title="indent",
        description="Indentation string used for each nesting level.",
        default=DEFAULT_XML_INDENT,
    )

    @field_validator("lang", "version")
    @classmethod
    def check_not_empty(cls, value, info):
        if not value.strip():
            raise ValueError(f"xml.{info.field_name} must not be empty")
        return value


class OutputConfig(ScadaXdfBaseModel):
    """Naming of generated documents"""

    suffixes: Dict[str, str] = Field(
        title="suffixes",
        description="File name suffix per document kind, appended to the station (B3) name.",
        default={
            DocumentKind.ADDRESSING.value: "_IFS.xml",
            DocumentKind.NETWORK_MODEL.value: "_IMM.xml",
        },
    )

    @field_validator("suffixes")
    @classmethod
    def check_suffixes(cls, suffixes):
        missing = [x.value for x in DocumentKind if x.value not in suffixes]
        if missing:
            raise ValueError(f"output.suffixes must define {missing}")
        return suffixes

    def get_suffix(self, kind: DocumentKind) -> str:
        return self.suffixes[kind.value]


class ValidationConfig(ScadaXdfBaseModel):
    """Column requirements of input tables"""

    required_columns: List[str] = Field(
        title="required_columns",
        description="Columns that must be present in every input table.",
        default=REQUIRED_COLUMNS,
    )
    optional_columns: List[str] = Field(
        title="optional_columns",
        description="Columns that are consumed when present.",
        default=OPTIONAL_COLUMNS,
    )


class AppConfig(ScadaXdfBaseModel):
    """SCADA XDF application configuration"""

    files: FilesConfig = Field(
        title="files",
        description="Input and output locations",
    )
    xml: XmlConfig = Field(
        title="xml",
        description="Document rendering settings",
        default_factory=XmlConfig,
    )
    output: OutputConfig = Field(
        title="output",
        description="Document naming settings",
        default_factory=OutputConfig,
    )
    validation: ValidationConfig = Field(
        title="validation",
        description="Input table requirements",
        default_factory=ValidationConfig,
    )

    @classmethod
    def from_file(cls, filename: Path):
        """Return an instance from a file.

        Relative templates and DASIP paths are resolved against the
        directory of filename.

        """
        filename = Path(filename)
        config = cls(**load_data(str(filename)))
        for field in ("templates", "dasip_mapping"):
            path = Path(getattr(config.files, field))
            if not path.is_absolute():
                setattr(config.files, field, str(filename.parent / path))
        return config

    def is_format_supported(self, extension: str) -> bool:
        return extension.lower() in self.files.supported_input_formats


class DasipConfig(ScadaXdfBaseModel):
    """Maps DASIP codes to the parent path of the addressing document"""

    default_path: str = Field(
        title="default_path",
        description="Parent path used for codes that are not mapped.",
        default=DEFAULT_DASIP_PATH,
    )
    dasip_mapping: Dict[str, str] = Field(
        title="dasip_mapping",
        description="DASIP code to addressing-document parent path.",
    )

    @field_validator("default_path")
    @classmethod
    def check_default_path(cls, default_path):
        return default_path or DEFAULT_DASIP_PATH

    @field_validator("dasip_mapping")
    @classmethod
    def check_dasip_mapping(cls, dasip_mapping):
        if not dasip_mapping:
            raise ValueError("dasip_mapping is empty")
        return dasip_mapping

    def get_parent_path(self, code) -> str:
        """Return the addressing-document parent path for a DASIP code."""
        path = self.dasip_mapping.get(code)
        if path is None:
            logger.warning(
                "DASIP value %r is not mapped. Using %s as the parent path.", code, self.default_path
            )
            return self.default_path
        return path


def load_app_config(filename=None):
    """Load the application configuration.

    Parameters
    ----------
    filename : str | Path, optional
        Defaults to the configuration shipped with the package.

    Returns
    -------
    AppConfig

    Raises
    ------
    InvalidConfiguration
        Raised if the file cannot be read or parsed, or its content is not a
        valid configuration.

    """
    filename = DEFAULT_CONFIG_FILE if filename is None else filename
    try:
        return AppConfig.from_file(filename)
    except (OSError, ValueError) as exc:
        raise InvalidConfiguration(f"invalid configuration in {filename}: {exc}") from exc


def load_dasip_config(filename=None):
    """Load the DASIP mapping; see :func:`load_app_config`."""
    filename = DEFAULT_DASIP_FILE if filename is None else filename
    try:
        return DasipConfig.from_file(filename)
    except (OSError, ValueError) as exc:
        raise InvalidConfiguration(f"invalid DASIP configuration in {filename}: {exc}") from exc
