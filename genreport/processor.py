"""
Turns one report file into one result file.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional
from xml.etree.ElementTree import Element

from .analysis import transform
from .errors import ReportError
from .load import read_xml, result_path, store_xml
from .models import GenerationReport, ReferenceData
from .output import to_element


def transform_documents(report_root: Element, reference_root: Element) -> Element:
    """
    Process one report document against one reference document.

    Raises:
        ReportError: If either document is malformed or a required field is missing
    """
    reference = ReferenceData.from_element(reference_root)
    report = GenerationReport.from_element(report_root)
    return to_element(transform(report, reference))


class ReportProcessor:
    """Reads a report and the reference data, writes the result next to the other outputs."""

    def __init__(self, output_dir: Path, reference_path: Path) -> None:
        self.output_dir = Path(output_dir)
        self.reference_path = Path(reference_path)

    def process(self, input_path: Path) -> Path:
        """
        Transform a single report file and write the result.

        Reference data is re-read on every call.

        Returns:
            Path of the written result file

        Raises:
            ReportError: If an input document is malformed
            OSError: If a file cannot be read or written
        """
        input_path = Path(input_path)
        report_root = read_xml(input_path)
        reference_root = read_xml(self.reference_path)
        result = transform_documents(report_root, reference_root)
        return store_xml(result, result_path(input_path, self.output_dir))

    def process_safely(self, input_path: Path) -> Optional[Path]:
        """Like process(), but report failures and return None so watching can continue."""
        input_path = Path(input_path)
        print(f"Processing file: {input_path.name}")
        try:
            output_path = self.process(input_path)
        except (ReportError, OSError) as e:
            print(f"Error processing {input_path.name}: {e}", file=sys.stderr)
            return None
        print(f"✓ Wrote {output_path}")
        return output_path
