"""Exceptions raised by SCADA XDF"""

from jade.exceptions import JadeBaseException, InvalidConfiguration, InvalidParameter


class ScadaXdfBaseException(JadeBaseException):
    """All SCADA XDF exceptions should derive from this."""


class EmptyTemplateRegistry(ScadaXdfBaseException):
    """Raise when a template source defines no elements."""


class TemplateParseError(ScadaXdfBaseException):
    """Raise when a template source cannot be parsed."""


class MissingColumnsError(ScadaXdfBaseException):
    """Raise when an input table lacks required columns."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"missing required columns: {', '.join(self.missing)}")


class InvalidTabularInput(ScadaXdfBaseException):
    """Raise when an input table cannot be read."""


class DocumentWriteError(ScadaXdfBaseException):
    """Raise when an XDF document cannot be written."""


EXCEPTIONS_TO_ERROR_CODES = {
    EmptyTemplateRegistry: {
        "description": "The template source does not define any element.",
        "corrective_action": "Check the templates file referenced by files.templates.",
        "error_code": 114,
    },
    TemplateParseError: {
        "description": "The template source could not be parsed.",
        "corrective_action": "Check the error message and fix the template definitions.",
        "error_code": 115,
    },
    MissingColumnsError: {
        "description": "The input table is missing required columns.",
        "corrective_action": "Add the columns listed in the error message or pass --station-path and --aor.",
        "error_code": 116,
    },
    InvalidTabularInput: {
        "description": "The input table could not be read.",
        "error_code": 117,
    },
    DocumentWriteError: {
        "description": "An XDF document could not be written.",
        "corrective_action": "Check permissions and free space of the output directory.",
        "error_code": 118,
    },
}


def get_error_code_from_exception(exception_class):
    """Return the error code for a SCADA XDF exception."""
    if issubclass(exception_class, (InvalidConfiguration, InvalidParameter)):
        return 119

    if not issubclass(exception_class, ScadaXdfBaseException):
        raise Exception(f"exception={exception_class} is not handled")

    if exception_class in EXCEPTIONS_TO_ERROR_CODES:
        return EXCEPTIONS_TO_ERROR_CODES[exception_class]["error_code"]

    # Return a generic error code for any exceptions that we don't specifically want to map.
    return 1
