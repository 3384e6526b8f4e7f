"""
Building registry.

Maps each supported canteen building to the path segment of its
menu page on the catering site.
"""

from enum import Enum
from typing import List

from .config import get_upstream_url


class UnknownBuildingError(ValueError):
    """Raised when a building identifier is not in the registry."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Unknown building: {value!r}. "
            f"Valid buildings: {[b.name.lower() for b in Building]}"
        )


class Building(Enum):
    """Supported buildings. The value is the upstream path segment."""
    AASTVEJ = "aastvej"
    MULTIHUSET = "multihuset"
    HAVREMARKEN = "havremarken"
    KIRKBI = "kloeverblomsten-kirkbi"
    MIDTOWN = "midtown"
    KORNMARKEN = "kornmarken"
    OESTERGADE = "kantine-oestergade"

    @classmethod
    def parse(cls, value: str) -> "Building":
        """
        Parse a building identifier, ignoring case.

        Accepts the building name ("aastvej", "KIRKBI") as well as the
        upstream path segment ("kloeverblomsten-kirkbi").

        Raises:
            UnknownBuildingError: If nothing matches
        """
        key = (value or "").strip().lower()
        for building in cls:
            if key == building.name.lower() or key == building.value:
                return building
        raise UnknownBuildingError(value)


def resolve(building: Building, base_url: str = None) -> str:
    """Get the menu page URL for a building."""
    base = (base_url or get_upstream_url()).rstrip("/")
    return f"{base}/{building.value}"


def list_buildings() -> List[Building]:
    return list(Building)
