"""
Purpose: Data shapes for the routing capability.
What it does:
- Defines the closed set of transport profiles and their OSRM path segments
- Defines the two engine operations (route, trip)
- Decodes OSRM JSON once into typed responses:
    RouteResponse (code, routes)
    TripResponse (code, trips, waypoints)
- Defines EngineResult, the normalized output of OSRMClient

Rule: No HTTP here. Decoding only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

# OSRM coordinate type: (lon, lat)
LonLat = Tuple[float, float]

# GeoJSON geometry as returned by OSRM ({"type": ..., "coordinates": [...]}).
# Opaque to everything above the client.
Geometry = Optional[Dict[str, Any]]


class TransportProfile(str, Enum):
    DRIVING = "driving"
    WALKING = "walking"
    CYCLING = "cycling"

    @property
    def path(self) -> str:
        """OSRM path segment for this profile."""
        return PROFILE_PATH_SEGMENTS[self]


PROFILE_PATH_SEGMENTS: Dict[TransportProfile, str] = {
    TransportProfile.DRIVING: "driving",
    TransportProfile.WALKING: "walking",
    TransportProfile.CYCLING: "cycling",
}


class EngineOperation(str, Enum):
    ROUTE = "route"
    TRIP = "trip"


@dataclass(frozen=True)
class Waypoint:
    """
    One entry of the trip operation's waypoint list.
    waypoint_index points back into the submitted coordinate list.
    """
    waypoint_index: int
    trips_index: Optional[int] = None
    name: Optional[str] = None
    location: Optional[LonLat] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> Waypoint:
        if not isinstance(data, dict):
            raise ValueError(f"waypoint must be an object, got {data!r}")

        # indices are used as-is: 1.7 or true are not indices
        waypoint_index = data["waypoint_index"]
        if isinstance(waypoint_index, bool) or not isinstance(waypoint_index, int):
            raise ValueError(f"waypoint_index must be an integer, got {waypoint_index!r}")

        trips_index = data.get("trips_index")
        if trips_index is not None and (isinstance(trips_index, bool) or not isinstance(trips_index, int)):
            raise ValueError(f"trips_index must be an integer, got {trips_index!r}")

        location = data.get("location")
        if location is not None and (not isinstance(location, (list, tuple)) or len(location) != 2):
            raise ValueError(f"waypoint location must be a [lon, lat] pair, got {location!r}")

        return cls(
            waypoint_index=waypoint_index,
            trips_index=trips_index,
            name=data.get("name"),
            location=(float(location[0]), float(location[1])) if location is not None else None,
        )


@dataclass(frozen=True)
class RoutedPath:
    """A single entry of OSRM's routes[] / trips[] list."""
    distance: float  # meters
    duration: float  # seconds
    geometry: Geometry = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> RoutedPath:
        return cls(
            distance=data["distance"],
            duration=data["duration"],
            geometry=data.get("geometry"),
        )


@dataclass(frozen=True)
class RouteResponse:
    code: Optional[str]
    routes: List[RoutedPath] = field(default_factory=list)
    message: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> RouteResponse:
        return cls(
            code=data.get("code"),
            routes=[RoutedPath.from_json(route) for route in data.get("routes") or []],
            message=data.get("message"),
        )

    @property
    def ok(self) -> bool:
        return self.code == "Ok" and bool(self.routes)

    def first(self) -> RoutedPath:
        return self.routes[0]


@dataclass(frozen=True)
class TripResponse:
    code: Optional[str]
    trips: List[RoutedPath] = field(default_factory=list)
    waypoints: Optional[List[Waypoint]] = None
    message: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> TripResponse:
        waypoints = data.get("waypoints")
        if waypoints is not None and not isinstance(waypoints, list):
            raise ValueError(f"waypoints must be a list, got {type(waypoints).__name__}")
        return cls(
            code=data.get("code"),
            trips=[RoutedPath.from_json(trip) for trip in data.get("trips") or []],
            waypoints=[Waypoint.from_json(w) for w in waypoints] if waypoints is not None else None,
            message=data.get("message"),
        )

    @property
    def ok(self) -> bool:
        return self.code == "Ok" and bool(self.trips)

    def first(self) -> RoutedPath:
        return self.trips[0]


RouteEngineResponse = Union[RouteResponse, TripResponse]


@dataclass(frozen=True)
class EngineResult:
    """
    Normalized output of OSRMClient.
    waypoints is None for the route operation and may be None or empty for trip.
    """
    operation: EngineOperation
    profile: TransportProfile
    distance: float
    duration: float
    geometry: Geometry = None
    waypoints: Optional[List[Waypoint]] = None
