"""Common definitions for SCADA XDF"""

EXIT_CODE_GOOD = 0

NETWORK_ROOT = "ELECTRICITY/NETWORK"

# Element code whose presence triggers the breaker link pass.
BREAKER_SENTINEL = "CB"
BREAKER_TERMINAL_NAME = "T1"
BREAKER_MEASUREMENT_CODES = ("P", "Q", "I_S", "U_RS")

MV_MOMENT_INFO = "MvMoment"
CONTROLLABLE_POINT_TYPE = "SP_SC"

REQUIRED_COLUMNS = ["ELEMENT", "INFO", "TYPE", "B1", "B2", "B3", "AOR", "EMPRESA", "REGION"]
OPTIONAL_COLUMNS = ["SBO", "MHB", "MMB", "MLB", "CHB", "CMB", "CLB", "DASIP"]
STATION_COLUMNS = ["EMPRESA", "REGION", "AOR"]

DEFAULT_DASIP_PATH = "SCADA/RTU"
DEFAULT_XML_LANG = "EN"
DEFAULT_XML_VERSION = "2.0.00"
DEFAULT_XML_INDENT = "    "
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

LOG_FILENAME = "scadaxdf.log"


def network_path(empresa, region, b1, b2, b3):
    """Return the network-model topology path for one station."""
    return "/".join((NETWORK_ROOT, empresa, region, b1, b2, b3))
