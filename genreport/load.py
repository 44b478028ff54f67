"""
Reads report and reference XML documents from disk and stores results.
"""

from __future__ import annotations

from pathlib import Path
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from .errors import MalformedInputError


def read_xml(input_path: Path) -> Element:
    """
    Parse an XML file and return its root element.

    Raises:
        MalformedInputError: If the file is not well-formed XML
        OSError: If the file cannot be read
    """
    input_path = Path(input_path)
    try:
        tree = ElementTree.parse(input_path)
    except ElementTree.ParseError as e:
        raise MalformedInputError(f"Invalid XML in {input_path.name}: {e}") from e
    return tree.getroot()


def store_xml(root: Element, output_path: Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    tree = ElementTree.ElementTree(root)
    ElementTree.indent(tree, space="  ")
    tree.write(output_path, encoding="utf-8", xml_declaration=True)
    return output_path


def result_path(input_path: Path, output_dir: Path) -> Path:
    """Output location for a report: ``<stem>-Result<suffix>`` inside output_dir."""
    input_path = Path(input_path)
    return Path(output_dir) / f"{input_path.stem}-Result{input_path.suffix}"
