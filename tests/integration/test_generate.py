"""Tests the scadaxdf CLI commands."""

import os
from pathlib import Path

from lxml import etree

from jade.utils.subprocess_manager import check_run_command, run_command
from tests.common import *


def test_generate(cleanup):
    cmd = f"{GENERATE} {SIGNALS_FILE} -c {APP_CONFIG_FILE} -o {OUTPUT}"
    check_run_command(cmd)
    assert sorted(os.listdir(OUTPUT)) == ["FDR01_IFS.xml", "FDR01_IMM.xml"]
    assert os.path.exists(LOG_FILE)

    addressing = etree.parse(os.path.join(OUTPUT, "FDR01_IFS.xml")).getroot()
    assert len(addressing.findall("Instances/Parent/IfsPoint")) == 6
    network = etree.parse(os.path.join(OUTPUT, "FDR01_IMM.xml")).getroot()
    assert len(network.findall("Instances/Parent")) == 2


def test_generate_with_station_path(cleanup):
    cmd = (
        f"{GENERATE} {SIGNALS_NO_STATION_FILE} -c {APP_CONFIG_FILE} -o {OUTPUT} "
        "--station-path EPM/NORTE/ANT/SUB1/FDR02 --aor AOR2 --verbose"
    )
    check_run_command(cmd)
    addressing = etree.parse(os.path.join(OUTPUT, "FDR02_IFS.xml")).getroot()
    parent = addressing.find("Instances/Parent")
    assert parent.get("Path") == "PI/IFS/EPM_P1_1/Chan0135/DASip2"
    network = etree.parse(os.path.join(OUTPUT, "FDR02_IMM.xml")).getroot()
    analog = network.find("Instances/Parent/Analog")
    assert analog.get("AreaOfResponsibilityId") == "AOR2"


def test_generate_override_templates_and_dasip(cleanup):
    cmd = (
        f"{GENERATE} {SIGNALS_FILE} -t {TEMPLATES_FILE} -d {DASIP_FILE} -o {OUTPUT}"
    )
    check_run_command(cmd)
    assert Path(OUTPUT, "FDR01_IMM.xml").exists()


def test_generate_missing_columns(cleanup):
    cmd = f"{GENERATE} {SIGNALS_MISSING_COLUMNS_FILE} -c {APP_CONFIG_FILE} -o {OUTPUT}"
    assert run_command(cmd) == 116
    assert not os.path.exists(OUTPUT)


def test_generate_station_path_requires_aor(cleanup):
    cmd = f"{GENERATE} {SIGNALS_NO_STATION_FILE} -o {OUTPUT} --station-path EPM/NORTE/ANT/SUB1/FDR02"
    assert run_command(cmd) != 0
    assert not os.path.exists(OUTPUT)


def test_generate_invalid_station_path(cleanup):
    cmd = f"{GENERATE} {SIGNALS_NO_STATION_FILE} -o {OUTPUT} --station-path EPM/NORTE --aor AOR2"
    assert run_command(cmd) == 119


def test_templates():
    output = {}
    ret = run_command(f"scadaxdf templates -t {TEMPLATES_FILE}", output=output)
    assert ret == 0
    assert "RTU_POINT" in output["stdout"]
    assert "breaker" in output["stdout"]


def test_templates_empty(test_data_dir):
    ret = run_command(f"scadaxdf templates -t {test_data_dir}/templates_empty.json")
    assert ret == 114


def test_show_config():
    output = {}
    ret = run_command(f"scadaxdf show-config -c {APP_CONFIG_FILE}", output=output)
    assert ret == 0
    assert "[files]" in output["stdout"]
    assert "test-output" in output["stdout"]


def test_generate_unparsable_dasip(cleanup, tmp_path):
    filename = tmp_path / "dasip.toml"
    filename.write_text("[dasip_mapping\n")
    cmd = f"{GENERATE} {SIGNALS_FILE} -c {APP_CONFIG_FILE} -d {filename} -o {OUTPUT}"
    assert run_command(cmd) == 119
    assert not os.path.exists(OUTPUT)


def test_generate_unparsable_config(cleanup, tmp_path):
    filename = tmp_path / "app.toml"
    filename.write_text("[files\n")
    cmd = f"{GENERATE} {SIGNALS_FILE} -c {filename} -o {OUTPUT}"
    assert run_command(cmd) == 119


def test_show_config_unparsable(tmp_path):
    filename = tmp_path / "app.toml"
    filename.write_text("[files\n")
    output = {}
    ret = run_command(f"scadaxdf show-config -c {filename}", output=output)
    assert ret == 119
    assert "error_code=119" in output["stdout"] + output["stderr"]
