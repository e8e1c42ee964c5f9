"""XDF document container and rendering."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from lxml import etree

from scadaxdf.common import (
    DEFAULT_XML_INDENT,
    DEFAULT_XML_LANG,
    DEFAULT_XML_VERSION,
    XML_DECLARATION,
)
from scadaxdf.exceptions import DocumentWriteError


logger = logging.getLogger(__name__)

XML_LANG_ATTRIBUTE = "{http://www.w3.org/XML/1998/namespace}lang"


@dataclass
class Parent:
    """Topology path and the elements placed under it."""

    path: str
    elements: List = field(default_factory=list)

    def to_element(self):
        element = etree.Element("Parent")
        element.set("Path", self.path)
        for item in self.elements:
            element.append(item.to_element())
        return element


@dataclass
class XdfDocument:
    """One XDF document made of one or more parent groups."""

    parents: List[Parent] = field(default_factory=list)
    lang: str = DEFAULT_XML_LANG
    version: str = DEFAULT_XML_VERSION

    @property
    def num_elements(self):
        return sum(len(x.elements) for x in self.parents)

    def is_empty(self):
        return self.num_elements == 0

    def to_element(self):
        root = etree.Element("XDF")
        root.set(XML_LANG_ATTRIBUTE, self.lang)
        root.set("XdfTypeSyntaxVersion", self.version)
        instances = etree.SubElement(root, "Instances")
        for parent in self.parents:
            instances.append(parent.to_element())
        return root

    def render(self, indent=DEFAULT_XML_INDENT):
        """Return the document as text, declaration included."""
        root = self.to_element()
        if indent:
            etree.indent(root, space=indent)
        body = etree.tostring(root, encoding="unicode")
        return XML_DECLARATION + body + "\n"

    def write(self, filename, indent=DEFAULT_XML_INDENT):
        """Write the document to filename.

        Raises
        ------
        DocumentWriteError

        """
        text = self.render(indent=indent)
        try:
            with open(filename, "w", encoding="utf-8") as f_out:
                f_out.write(text)
        except OSError as exc:
            raise DocumentWriteError(f"could not write {filename}: {exc}") from exc

        logger.info("Wrote %s with %s elements", filename, self.num_elements)
        return Path(filename)
