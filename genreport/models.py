"""
Data models for generation reports and reference factor data.

Numbers are read with one of two disciplines:

* tolerant fields (``Energy``, ``Price``, ``EmissionsRating``) fall back to 0
  when the element is absent or its text is not a number;
* required fields (coal ``TotalHeatInput`` and ``ActualNetGeneration``, and
  reference buckets once a location looks them up) raise a ``ReportError``
  instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional
from xml.etree.ElementTree import Element

from .errors import MalformedInputError, MissingRequiredFieldError
from .locations import COAL_GROUP, FactorBucket


def local_name(tag: str) -> str:
    """Strip any ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def find_child(element: Element, name: str) -> Optional[Element]:
    """Return the first child whose local name is ``name``."""
    for child in element:
        if local_name(child.tag) == name:
            return child
    return None


def iter_children(element: Element, name: str) -> Iterator[Element]:
    for child in element:
        if local_name(child.tag) == name:
            yield child


def element_text(element: Element) -> str:
    """Concatenated text content of an element and its descendants."""
    return "".join(element.itertext())


def child_text(element: Element, name: str) -> Optional[str]:
    child = find_child(element, name)
    return element_text(child) if child is not None else None


def parse_float(text: str) -> float:
    """
    Parse plain decimal or exponent notation.

    Raises:
        ValueError: If the text is not a number, including Python-only
            digit separators such as ``1_000``
    """
    if "_" in text:
        raise ValueError(f"could not convert string to float: '{text}'")
    return float(text.strip())


def parse_number_or_default(text: Optional[str], default: float = 0.0) -> float:
    """Parse ``text`` as a float, returning ``default`` if absent or invalid."""
    if text is None:
        return default
    try:
        return parse_float(text)
    except ValueError:
        return default


def parse_optional_number(text: Optional[str]) -> Optional[float]:
    if text is None:
        return None
    try:
        return parse_float(text)
    except ValueError:
        return None


def parse_required_number(element: Element, name: str, context: str) -> float:
    """
    Parse the numeric text of child ``name``.

    Raises:
        MissingRequiredFieldError: If the child element is absent
        MalformedInputError: If the child's text is not a number
    """
    text = child_text(element, name)
    if text is None:
        raise MissingRequiredFieldError(name, context)
    try:
        return parse_float(text)
    except ValueError as e:
        raise MalformedInputError(f"Invalid number '{text}' for '{name}' in {context}") from e


@dataclass(frozen=True)
class FactorTable:
    """
    A Low/Medium/High multiplier table from the reference data.

    Buckets are optional until looked up: a table with a missing or
    non-numeric bucket is only an error for generators whose location needs it.
    """

    low: Optional[float]
    medium: Optional[float]
    high: Optional[float]
    context: str = "factor table"

    def get(self, bucket: FactorBucket) -> float:
        """
        Raises:
            MalformedInputError: If the bucket was missing or not numeric
        """
        if bucket is FactorBucket.LOW:
            value = self.low
        elif bucket is FactorBucket.MEDIUM:
            value = self.medium
        else:
            value = self.high
        if value is None:
            raise MalformedInputError(f"Missing or invalid '{bucket}' factor in {self.context}")
        return value

    @classmethod
    def from_element(cls, element: Element, context: str) -> FactorTable:
        return cls(
            low=parse_optional_number(child_text(element, FactorBucket.LOW)),
            medium=parse_optional_number(child_text(element, FactorBucket.MEDIUM)),
            high=parse_optional_number(child_text(element, FactorBucket.HIGH)),
            context=context,
        )


@dataclass(frozen=True)
class ReferenceData:
    """Value and emissions factor tables."""

    value_factor: FactorTable
    emissions_factor: FactorTable

    @classmethod
    def from_element(cls, root: Element) -> ReferenceData:
        """
        Create ReferenceData from the root of a reference document.

        Raises:
            MalformedInputError: If Factors, ValueFactor or EmissionsFactor is missing
        """
        factors = find_child(root, "Factors")
        if factors is None:
            raise MalformedInputError("Reference data has no 'Factors' element")

        tables = {}
        for name in ("ValueFactor", "EmissionsFactor"):
            table_element = find_child(factors, name)
            if table_element is None:
                raise MalformedInputError(f"Reference data has no 'Factors/{name}' element")
            tables[name] = FactorTable.from_element(table_element, f"Factors/{name}")

        return cls(value_factor=tables["ValueFactor"], emissions_factor=tables["EmissionsFactor"])


@dataclass(frozen=True)
class Day:
    """One daily generation entry."""

    date: Optional[str]
    energy: float
    price: float

    @classmethod
    def from_element(cls, element: Element) -> Day:
        return cls(
            date=child_text(element, "Date"),
            energy=parse_number_or_default(child_text(element, "Energy")),
            price=parse_number_or_default(child_text(element, "Price")),
        )


@dataclass(frozen=True)
class Generator:
    """A single generator and its daily generation history."""

    name: str
    location: Optional[str] = None
    emissions_rating: float = 0.0
    total_heat_input: Optional[float] = None
    actual_net_generation: Optional[float] = None
    days: tuple[Day, ...] = ()

    @classmethod
    def from_element(cls, element: Element, require_heat_fields: bool = False) -> Generator:
        """
        Create a Generator from its report element.

        Args:
            element: The generator element
            require_heat_fields: Fail if TotalHeatInput or ActualNetGeneration is
                missing or not numeric (coal generators)

        Raises:
            MissingRequiredFieldError: If Name, or a required heat field, is missing
        """
        tag = local_name(element.tag)
        name = child_text(element, "Name")
        if name is None:
            raise MissingRequiredFieldError("Name", f"generator element '{tag}'")

        if require_heat_fields:
            context = f"generator '{name}'"
            total_heat_input = parse_required_number(element, "TotalHeatInput", context)
            actual_net_generation = parse_required_number(element, "ActualNetGeneration", context)
        else:
            total_heat_input = parse_optional_number(child_text(element, "TotalHeatInput"))
            actual_net_generation = parse_optional_number(child_text(element, "ActualNetGeneration"))

        generation = find_child(element, "Generation")
        days = ()
        if generation is not None:
            days = tuple(Day.from_element(day) for day in iter_children(generation, "Day"))

        return cls(
            name=name,
            location=child_text(element, "Location"),
            emissions_rating=parse_number_or_default(child_text(element, "EmissionsRating")),
            total_heat_input=total_heat_input,
            actual_net_generation=actual_net_generation,
            days=days,
        )


@dataclass(frozen=True)
class GeneratorGroup:
    """A generator type grouping such as Wind, Gas or Coal."""

    name: str
    generators: tuple[Generator, ...] = ()

    @property
    def is_coal(self) -> bool:
        return self.name == COAL_GROUP

    @classmethod
    def from_element(cls, element: Element) -> GeneratorGroup:
        name = local_name(element.tag)
        is_coal = name == COAL_GROUP
        return cls(
            name=name,
            generators=tuple(
                Generator.from_element(child, require_heat_fields=is_coal) for child in element
            ),
        )


@dataclass(frozen=True)
class GenerationReport:
    """All generator groupings from one report, in document order."""

    groups: tuple[GeneratorGroup, ...] = ()

    @classmethod
    def from_element(cls, root: Element) -> GenerationReport:
        return cls(groups=tuple(GeneratorGroup.from_element(child) for child in root))
