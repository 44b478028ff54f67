"""
Location and factor bucket constants used to look up reference factors.
"""

from enum import StrEnum


class FactorBucket(StrEnum):
    """
    Bucket names used by the reference factor tables.

    Each member value matches the element name under ``ValueFactor`` and
    ``EmissionsFactor`` in the reference document.
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Location(StrEnum):
    """
    Generator locations recognised in a generation report.

    Usage:
        >>> Location("Coal")  # Location.COAL
        >>> Location.COAL.bucket  # FactorBucket.HIGH
    """

    OFFSHORE = "Offshore"
    ONSHORE = "Onshore"
    GAS = "Gas"
    COAL = "Coal"

    @property
    def bucket(self) -> FactorBucket:
        return LOCATION_BUCKETS[self]

    @classmethod
    def parse(cls, value: str | None) -> "Location | None":
        """Return the matching Location, or None for absent or unknown values."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


LOCATION_BUCKETS: dict[Location, FactorBucket] = {
    Location.OFFSHORE: FactorBucket.LOW,
    Location.ONSHORE: FactorBucket.HIGH,
    Location.GAS: FactorBucket.MEDIUM,
    Location.COAL: FactorBucket.HIGH,
}

# Factor used when a generator has no recognised location
DEFAULT_FACTOR = 1.0

# Grouping name whose generators get a heat rate
COAL_GROUP = "Coal"
