"""Constant-time lookup of parking spots by exact coordinates."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A location on the map given by latitude and longitude."""

    lat: float
    lon: float


class ParkingRegistry:
    """A hash-based set of parking locations with O(1) average lookup.

    Coordinates are compared exactly, so a point must match a stored one
    bit for bit to be found.
    """

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._points: set[Point] = set(points)

    def add(self, point: Point) -> None:
        """Register a parking location."""
        self._points.add(point)

    def search(self, point: Point) -> bool:
        """Return True if a parking spot is registered at ``point``."""
        return point in self._points

    def __contains__(self, point: object) -> bool:
        return point in self._points

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)


def default_registry() -> ParkingRegistry:
    """Return a fresh registry holding the two sample parking spots."""
    return ParkingRegistry(
        [
            Point(lat=35.69083, lon=139.75856),
            Point(lat=55.75222, lon=37.61556),
        ]
    )


_DEFAULT = default_registry()


def parking_search(point: Point) -> bool:
    """Look ``point`` up in the shared registry of sample parking spots."""
    return _DEFAULT.search(point)