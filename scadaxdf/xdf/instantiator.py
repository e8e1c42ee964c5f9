"""Instantiates network-model elements from templates."""

import logging

from scadaxdf.enums import ElementKind


logger = logging.getLogger(__name__)


def instantiate_element(row, registry, display_name, warnings=None):
    """Create the network-model element for a row.

    Parameters
    ----------
    row : Row
    registry : TemplateRegistry
    display_name : str
    warnings : list, optional
        Row-scoped problems are appended here as well as logged.

    Returns
    -------
    Analog | Discrete | Breaker | None
        None if the element code has no usable template.

    """
    if warnings is None:
        warnings = []

    code = row.element
    template = registry.lookup(code)
    if template is None:
        _warn(warnings, f"element {code!r} is not defined in the templates; skipping its network-model element")
        return None

    instance = registry.instantiate(template)

    aor = row.value("AOR")
    element = instance.element
    kind = instance.kind
    if kind == ElementKind.IFS_POINT:
        _warn(warnings, f"template {code!r} is an IfsPoint and is not part of the network model")
        return None

    element.name = display_name
    element.area_of_responsibility_id = aor
    if kind == ElementKind.BREAKER and element.discrete is not None:
        element.discrete.name = display_name
        element.discrete.area_of_responsibility_id = aor

    return element


def _warn(warnings, message):
    logger.warning(message)
    warnings.append(message)
