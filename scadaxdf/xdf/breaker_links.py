"""Resolves the links between the breaker terminal and station measurements.

The pass runs once over the whole dataset after every row has been processed.
"""

import logging
from dataclasses import dataclass

from scadaxdf.common import (
    BREAKER_MEASUREMENT_CODES,
    BREAKER_SENTINEL,
    BREAKER_TERMINAL_NAME,
)
from scadaxdf.models.elements import LinkedTerminal, TerminalMeasurementLink


logger = logging.getLogger(__name__)


@dataclass
class BreakerLinkGroup:
    """Terminals of one breaker and their measurement links."""

    breaker_name: str
    terminals: list


def find_breaker_row(rows):
    """Return the last row whose element is the breaker sentinel, or None."""
    breaker_row = None
    for row in rows:
        if row.element == BREAKER_SENTINEL:
            breaker_row = row
    return breaker_row


def resolve_breaker_links(rows):
    """Return the breaker link group for rows, or None.

    Parameters
    ----------
    rows : list
        All rows of the dataset

    Returns
    -------
    BreakerLinkGroup | None
        None if there is no breaker row or no measurement to link.

    """
    breaker_row = find_breaker_row(rows)
    if breaker_row is None:
        return None

    base_path = breaker_row.station_path
    links = []
    for row in rows:
        if row.element in BREAKER_MEASUREMENT_CODES:
            display_name = row.element.replace("_", " ")
            links.append(TerminalMeasurementLink(path_b=f"{base_path}/{display_name}"))

    if not links:
        logger.info("Breaker row found but no measurement matches %s", ", ".join(BREAKER_MEASUREMENT_CODES))
        return None

    logger.debug("Linked %s measurements to terminal %s", len(links), BREAKER_TERMINAL_NAME)
    terminal = LinkedTerminal(name=BREAKER_TERMINAL_NAME, links=links)
    return BreakerLinkGroup(breaker_name=BREAKER_SENTINEL, terminals=[terminal])
