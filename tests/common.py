"""Common definitions and functionality for tests"""

import os


DATA_DIR = os.path.join(os.path.dirname(__file__), "data")
APP_CONFIG_FILE = os.path.join(DATA_DIR, "app.toml")
DASIP_FILE = os.path.join(DATA_DIR, "dasip.toml")
TEMPLATES_FILE = os.path.join(DATA_DIR, "templates.json")
SIGNALS_FILE = os.path.join(DATA_DIR, "signals.csv")
SIGNALS_NO_STATION_FILE = os.path.join(DATA_DIR, "signals_no_station.csv")
SIGNALS_MISSING_COLUMNS_FILE = os.path.join(DATA_DIR, "signals_missing_columns.csv")

GENERATE = "scadaxdf generate"
OUTPUT = "test-output"
LOG_FILE = "scadaxdf.log"

HEADERS = ["ELEMENT", "INFO", "TYPE", "B1", "B2", "B3", "AOR", "EMPRESA", "REGION"]
STATION = ["A", "B", "C", "R1", "E", "N"]
STATION_PATH = "ELECTRICITY/NETWORK/E/N/A/B/C"


def make_header_map(headers=None):
    headers = HEADERS if headers is None else headers
    return {name: i for i, name in enumerate(headers)}


def make_row(element, info, point_type, **extra):
    """Return a row of HEADERS followed by the values of extra in order."""
    row = [element, info, point_type] + STATION
    row += list(extra.values())
    return row
