"""
XML document helpers
"""

import logging
import xml.etree.ElementTree as ET

from .exceptions import MalformedDocumentError

logger = logging.getLogger(__name__)


def parse_document(text: str) -> ET.Element:
    """Parse a raw XML payload and return its root element"""
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        logger.debug(f"Unparseable XML payload: {text[:200]!r}")
        raise MalformedDocumentError(f"Invalid XML document: {e}") from e


def extract(element: ET.Element, field_name: str) -> str:
    """
    Return the text of the first descendant named field_name

    Nested text is concatenated and returned untrimmed. A missing or empty
    element yields an empty string.
    """
    node = element.find(f".//{field_name}")
    if node is None:
        return ""
    return "".join(node.itertext())


def find_series_element(document: ET.Element) -> ET.Element:
    """Return the top-level Series element of a show-detail document"""
    if document.tag == "Series":
        return document
    series = document.find("Series")
    if series is None:
        raise MalformedDocumentError(
            f"Expected a <Series> element under <{document.tag}>"
        )
    return series
