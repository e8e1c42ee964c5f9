"""Common functions for CLI scripts"""

import logging
import sys

from jade.exceptions import InvalidConfiguration, InvalidParameter
from scadaxdf.exceptions import ScadaXdfBaseException, get_error_code_from_exception


logger = logging.getLogger(__name__)

HANDLED_EXCEPTIONS = (ScadaXdfBaseException, InvalidConfiguration, InvalidParameter)


def exit_on_error(exc):
    """Log a fatal error and exit with its error code."""
    error_code = get_error_code_from_exception(type(exc))
    logger.error("%s (error_code=%s)", exc, error_code)
    sys.exit(error_code)
