"""Generates the addressing and network-model documents of a station."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from scadaxdf.common import REQUIRED_COLUMNS
from scadaxdf.config import load_dasip_config
from scadaxdf.config.app_config import OutputConfig, XmlConfig
from scadaxdf.enums import DocumentKind
from scadaxdf.exceptions import DocumentWriteError
from scadaxdf.templates import TemplateRegistry
from scadaxdf.xdf.breaker_links import BreakerLinkGroup, resolve_breaker_links
from scadaxdf.xdf.document import Parent, XdfDocument
from scadaxdf.xdf.instantiator import instantiate_element
from scadaxdf.xdf.points import build_ifs_point, get_display_name
from scadaxdf.xdf.rows import make_rows, validate_columns


logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Everything produced from one input table."""

    station: str = ""
    points: List = field(default_factory=list)
    elements: List = field(default_factory=list)
    breaker_links: Optional[BreakerLinkGroup] = None
    documents: Dict[DocumentKind, XdfDocument] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    @property
    def addressing(self):
        return self.documents.get(DocumentKind.ADDRESSING)

    @property
    def network_model(self):
        return self.documents.get(DocumentKind.NETWORK_MODEL)


class XdfGenerator:
    """Transforms signal rows into XDF documents.

    Parameters
    ----------
    registry : TemplateRegistry
    resolve_dasip : callable
        Maps a DASIP code to the parent path of the addressing document.
    xml_config : XmlConfig, optional
    required_columns : list, optional

    """

    def __init__(self, registry, resolve_dasip, xml_config=None, required_columns=None):
        self._registry = registry
        self._resolve_dasip = resolve_dasip
        self._xml_config = xml_config or XmlConfig()
        self._required_columns = REQUIRED_COLUMNS if required_columns is None else required_columns

    @classmethod
    def from_config(cls, config, templates_file=None, dasip_file=None):
        """Create a generator from an AppConfig.

        templates_file and dasip_file override the paths in config.
        """
        registry = TemplateRegistry.from_file(templates_file or config.files.templates)
        for warning in registry.validate():
            logger.warning(warning)
        dasip = load_dasip_config(dasip_file or config.files.dasip_mapping)
        return cls(
            registry,
            dasip.get_parent_path,
            xml_config=config.xml,
            required_columns=config.validation.required_columns,
        )

    @property
    def registry(self):
        return self._registry

    def generate(self, header_map, rows):
        """Build the documents for rows.

        Parameters
        ----------
        header_map : dict
            Column name to index
        rows : list
            Data rows, each a list of strings

        Returns
        -------
        GenerationResult

        Raises
        ------
        MissingColumnsError
            Raised before any row is processed if a required column is missing.

        """
        validate_columns(header_map, self._required_columns)
        result = GenerationResult()
        rows = make_rows(rows, header_map)
        if not rows:
            logger.warning("The input does not contain any data row.")
            return result

        for row in rows:
            if not row.element:
                logger.debug("Skipping %s: ELEMENT is empty", row)
                continue
            display_name = get_display_name(row.element, row.info)
            result.points.append(build_ifs_point(row, self._registry))
            element = instantiate_element(row, self._registry, display_name, warnings=result.warnings)
            if element is not None:
                result.elements.append(element)

        result.breaker_links = resolve_breaker_links(rows)

        first_row = rows[0]
        result.station = first_row.value("B3")
        self._assemble(result, first_row)
        logger.info(
            "Station %s: %s points, %s network-model elements, %s warnings",
            result.station,
            len(result.points),
            len(result.elements),
            len(result.warnings),
        )
        return result

    def _assemble(self, result, first_row):
        if result.points:
            parent_path = self._resolve_dasip(first_row.value("DASIP"))
            result.documents[DocumentKind.ADDRESSING] = self._make_document(
                [Parent(path=parent_path, elements=list(result.points))]
            )
        else:
            logger.info("No addressing points; the addressing document is not generated.")

        network_path = first_row.station_path
        parents = [Parent(path=network_path, elements=list(result.elements))]
        if result.breaker_links is not None:
            links = result.breaker_links
            parents.append(
                Parent(path=f"{network_path}/{links.breaker_name}", elements=list(links.terminals))
            )
        document = self._make_document(parents)
        if document.is_empty():
            logger.info("No network-model elements; the network-model document is not generated.")
        else:
            result.documents[DocumentKind.NETWORK_MODEL] = document

    def _make_document(self, parents):
        return XdfDocument(
            parents=parents,
            lang=self._xml_config.lang,
            version=self._xml_config.version,
        )

    def write(self, result, output_dir, output_config=None):
        """Write the documents of result to output_dir.

        Returns
        -------
        list
            Paths of the files written, one per non-empty document.

        Raises
        ------
        DocumentWriteError

        """
        output_config = output_config or OutputConfig()
        try:
            os.makedirs(output_dir, exist_ok=True)
        except OSError as exc:
            raise DocumentWriteError(f"could not create {output_dir}: {exc}") from exc

        indent = self._xml_config.indent
        filenames = []
        for kind in DocumentKind:
            document = result.documents.get(kind)
            if document is None:
                continue
            filename = Path(output_dir) / (result.station + output_config.get_suffix(kind))
            filenames.append(document.write(filename, indent=indent))
        return filenames
