"""
Analysis over parsed generation reports.

These helpers operate on already-parsed models and do not handle reading
files or serializing output.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from .errors import MissingRequiredFieldError
from .locations import DEFAULT_FACTOR, Location
from .models import FactorTable, GenerationReport, Generator, ReferenceData


@dataclass(frozen=True)
class GeneratorTotal:
    """Total generation value for one generator."""

    name: str
    total: float


@dataclass(frozen=True)
class MaxEmissionDay:
    """The day with the highest emission for one generator."""

    name: str
    date: Optional[str]
    emission: float


@dataclass(frozen=True)
class ActualHeatRate:
    """Heat rate for one coal generator."""

    name: str
    heat_rate: float


@dataclass
class GenerationOutput:
    """The three result sections, each in report traversal order."""

    totals: list[GeneratorTotal] = field(default_factory=list)
    max_emission_generators: list[MaxEmissionDay] = field(default_factory=list)
    actual_heat_rates: list[ActualHeatRate] = field(default_factory=list)


def resolve_factor(factor_table: FactorTable, location: Optional[str]) -> float:
    """
    Look up the factor for a generator location.

    Args:
        factor_table: Value or emissions factor table
        location: Location text from the report, possibly None

    Returns:
        The table value for the location's bucket, or 1.0 for absent or unknown locations
    """
    known = Location.parse(location)
    if known is None:
        return DEFAULT_FACTOR
    return factor_table.get(known.bucket)


def divide(numerator: float, denominator: float) -> float:
    """Float division following IEEE-754 for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


class GenerationStats:
    """Encapsulates per-generator calculations over one report and its reference data."""

    def __init__(self, report: GenerationReport, reference: ReferenceData):
        """
        Args:
            report: Parsed generation report
            reference: Parsed reference factors
        """
        self.report = report
        self.reference = reference

    @staticmethod
    def compute_total(generator: Generator, value_factor: float) -> float:
        """Sum of Energy x Price x value_factor over all days; 0 with no days."""
        return sum((day.energy * day.price * value_factor for day in generator.days), 0.0)

    @staticmethod
    def compute_max_emission_day(
        generator: Generator, emission_factor: float
    ) -> Optional[MaxEmissionDay]:
        """
        Find the day with the highest emission for a generator.

        Emission is Energy x EmissionsRating x emission_factor. Ties keep the
        earliest day in document order.

        Returns:
            MaxEmissionDay, or None if the generator has no days
        """
        peak: Optional[MaxEmissionDay] = None

        for day in generator.days:
            emission = day.energy * generator.emissions_rating * emission_factor
            if peak is None or emission > peak.emission:
                peak = MaxEmissionDay(name=generator.name, date=day.date, emission=emission)

        return peak

    @staticmethod
    def compute_heat_rate(generator: Generator) -> float:
        """
        TotalHeatInput / ActualNetGeneration.

        Raises:
            MissingRequiredFieldError: If either operand is missing
        """
        context = f"generator '{generator.name}'"
        if generator.total_heat_input is None:
            raise MissingRequiredFieldError("TotalHeatInput", context)
        if generator.actual_net_generation is None:
            raise MissingRequiredFieldError("ActualNetGeneration", context)
        return divide(generator.total_heat_input, generator.actual_net_generation)

    def run(self) -> GenerationOutput:
        """Traverse every grouping and generator in document order and collect results."""
        output = GenerationOutput()

        for group in self.report.groups:
            for generator in group.generators:
                value_factor = resolve_factor(self.reference.value_factor, generator.location)
                emission_factor = resolve_factor(self.reference.emissions_factor, generator.location)

                output.totals.append(
                    GeneratorTotal(
                        name=generator.name,
                        total=self.compute_total(generator, value_factor),
                    )
                )

                max_day = self.compute_max_emission_day(generator, emission_factor)
                if max_day is not None:
                    output.max_emission_generators.append(max_day)

                if group.is_coal:
                    output.actual_heat_rates.append(
                        ActualHeatRate(
                            name=generator.name,
                            heat_rate=self.compute_heat_rate(generator),
                        )
                    )

        return output


def transform(report: GenerationReport, reference: ReferenceData) -> GenerationOutput:
    return GenerationStats(report, reference).run()
