import json
import os

import pytest

from jade.exceptions import InvalidConfiguration
from scadaxdf.config import (
    AppConfig,
    DasipConfig,
    DEFAULT_CONFIG_FILE,
    load_app_config,
    load_dasip_config,
)
from scadaxdf.config.app_config import OutputConfig, XmlConfig
from scadaxdf.enums import DocumentKind
from tests.common import APP_CONFIG_FILE, DATA_DIR


def test_default_config():
    config = load_app_config()
    assert os.path.isfile(config.files.templates)
    assert os.path.isfile(config.files.dasip_mapping)
    assert config.xml.lang == "EN"
    assert config.xml.version == "2.0.00"
    assert config.output.get_suffix(DocumentKind.ADDRESSING) == "_IFS.xml"
    assert config.output.get_suffix(DocumentKind.NETWORK_MODEL) == "_IMM.xml"
    assert "ELEMENT" in config.validation.required_columns
    assert config.is_format_supported(".CSV")
    assert config.is_format_supported(".xlsx")
    assert not config.is_format_supported(".txt")


def test_default_dasip_config():
    dasip = load_dasip_config()
    assert len(dasip.dasip_mapping) == 15
    assert dasip.get_parent_path("1") == "PI/IFS/EPM_P1_1/Chan0133/DASip1"
    assert dasip.get_parent_path("999") == "SCADA/RTU"


def test_relative_paths():
    config = AppConfig.from_file(APP_CONFIG_FILE)
    assert config.files.templates == os.path.join(DATA_DIR, "templates.json")
    assert config.files.output_dir == "test-output"
    assert config.xml.indent == "  "


def test_default_config_file():
    assert load_app_config(DEFAULT_CONFIG_FILE) == load_app_config()


def test_unparsable_app_config(tmp_path):
    filename = tmp_path / "app.toml"
    filename.write_text("[files\n")
    with pytest.raises(InvalidConfiguration):
        load_app_config(filename)
    with pytest.raises(InvalidConfiguration):
        load_app_config(tmp_path / "missing.toml")


def test_unparsable_dasip_config(tmp_path):
    filename = tmp_path / "dasip.toml"
    filename.write_text("[dasip_mapping\n")
    with pytest.raises(InvalidConfiguration):
        load_dasip_config(filename)
    with pytest.raises(InvalidConfiguration):
        load_dasip_config(tmp_path / "missing.toml")


def test_invalid_app_config(tmp_path):
    filename = tmp_path / "app.toml"
    filename.write_text('[files]\ntemplates = ""\ndasip_mapping = "dasip.toml"\n')
    with pytest.raises(InvalidConfiguration):
        load_app_config(filename)

    filename.write_text('[files]\ntemplates = "t.json"\ndasip_mapping = "d.toml"\n[xml]\nlang = " "\n')
    with pytest.raises(InvalidConfiguration):
        load_app_config(filename)


def test_invalid_output_config():
    with pytest.raises(ValueError):
        OutputConfig(suffixes={"ifs": "_IFS.xml"})


def test_invalid_xml_config():
    with pytest.raises(ValueError):
        XmlConfig(version="")


def test_dasip_config(tmp_path):
    dasip = DasipConfig(default_path="", dasip_mapping={"1": "PATH/1"})
    assert dasip.default_path == "SCADA/RTU"
    assert dasip.get_parent_path("1") == "PATH/1"
    assert dasip.get_parent_path("") == "SCADA/RTU"

    filename = tmp_path / "dasip.toml"
    filename.write_text('default_path = "X"\n[dasip_mapping]\n')
    with pytest.raises(InvalidConfiguration):
        load_dasip_config(filename)


def test_schema_json():
    schema = json.loads(AppConfig.schema_json())
    assert schema["title"] == "AppConfig"
    assert "files" in schema["properties"]
    schema = json.loads(DasipConfig.schema_json(indent=None))
    assert "dasip_mapping" in schema["properties"]
