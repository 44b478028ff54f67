"""
Builds the GenerationOutput XML tree from analysis results.
"""

from __future__ import annotations

import math
from typing import Optional
from xml.etree.ElementTree import Element, SubElement

from .analysis import GenerationOutput


def format_number(value: float) -> str:
    """Default float text, with XML Schema spellings for non-finite values."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    return str(value)


def _add_field(parent: Element, name: str, text: Optional[str]) -> None:
    child = SubElement(parent, name)
    if text is not None:
        child.text = text


def to_element(output: GenerationOutput) -> Element:
    """
    Serialize results under a GenerationOutput root.

    Sections are always written, in the order Totals, MaxEmissionGenerators,
    ActualHeatRates, even when empty.
    """
    root = Element("GenerationOutput")

    totals = SubElement(root, "Totals")
    for entry in output.totals:
        generator = SubElement(totals, "Generator")
        _add_field(generator, "Name", entry.name)
        _add_field(generator, "Total", format_number(entry.total))

    max_emissions = SubElement(root, "MaxEmissionGenerators")
    for entry in output.max_emission_generators:
        day = SubElement(max_emissions, "Day")
        _add_field(day, "Name", entry.name)
        _add_field(day, "Date", entry.date)
        _add_field(day, "Emission", format_number(entry.emission))

    heat_rates = SubElement(root, "ActualHeatRates")
    for entry in output.actual_heat_rates:
        heat_rate = SubElement(heat_rates, "ActualHeatRate")
        _add_field(heat_rate, "Name", entry.name)
        _add_field(heat_rate, "HeatRate", format_number(entry.heat_rate))

    return root
