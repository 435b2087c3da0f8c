"""
Purpose: Domain models for the Trips capability.
What it does:
- Defines core data structures:
- Place (id, lat/lon, optional display name / category / sort order)
- RouteResult (distance, duration, geometry, ordered place ids)
- ModeRoute / MultiModeRoute (per transport mode comparison)

Rule: No HTTP calls, no routing logic. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from routing.models import Geometry, LonLat, TransportProfile

LatLon = Tuple[float, float]
PlaceId = Any  # opaque, whatever the plan store uses (ints for user-service)


@dataclass(frozen=True)
class Place:
    """
    A stop of a trip plan as returned by the place provider.
    Read-only for the duration of a routing request.
    """

    id: PlaceId
    lat: float
    lon: float
    display_name: Optional[str] = None
    category: Optional[str] = None
    sort_order: Optional[int] = None

    @property
    def lat_lon(self) -> LatLon:
        return (self.lat, self.lon)

    @property
    def lon_lat(self) -> LonLat:
        # OSRM wants longitude first
        return (self.lon, self.lat)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> Place:
        if not isinstance(data, dict):
            raise ValueError(f"place must be an object, got {data!r}")

        try:
            place_id = data["id"]
            lat = float(data["lat"])
            lon = float(data["lon"])
        except KeyError as exc:
            raise ValueError(f"place payload is missing {exc}") from exc
        except TypeError as exc:
            raise ValueError(f"place {data.get('id')!r} has no coordinates") from exc

        return cls(
            id=place_id,
            lat=lat,
            lon=lon,
            display_name=data.get("displayName"),
            category=data.get("category"),
            sort_order=data.get("sortOrder"),
        )


@dataclass(frozen=True)
class RouteResult:
    """
    What the routing layer hands back to its caller.
    distance/duration/geometry are exactly what OSRM reported.
    """

    distance_meters: float
    duration_seconds: float
    geometry: Geometry
    ordered_place_ids: List[PlaceId]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "distanceMeters": self.distance_meters,
            "durationSeconds": self.duration_seconds,
            "geometry": self.geometry,
            "orderedPlaceIds": list(self.ordered_place_ids),
        }


@dataclass(frozen=True)
class ModeRoute:
    mode: TransportProfile
    distance_meters: float
    duration_seconds: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "distanceMeters": self.distance_meters,
            "durationSeconds": self.duration_seconds,
        }


@dataclass(frozen=True)
class MultiModeRoute:
    """
    Side by side totals for the same trip plan in every transport mode.
    """

    driving: ModeRoute
    walking: ModeRoute
    cycling: ModeRoute

    def to_dict(self) -> Dict[str, Any]:
        return {
            "driving": self.driving.to_dict(),
            "walking": self.walking.to_dict(),
            "cycling": self.cycling.to_dict(),
        }
