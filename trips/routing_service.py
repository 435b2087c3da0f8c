"""
Purpose: Orchestrator for routing a trip plan (the "glue").
What it does:
Fetches the places of a trip plan, checks there is something to route,
asks OSRM either to keep the planned order or to find a shorter one,
and maps OSRM's waypoint indices back onto place ids.

Rule: No HTTP details here (see routing.osrm_client / trips.place_provider),
no retries, no caching. Failures go straight back to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple

from routing.models import EngineOperation, EngineResult, LonLat, TransportProfile, Waypoint
from routing.osrm_client import EngineFailure, OSRMClient

from .models import ModeRoute, MultiModeRoute, Place, PlaceId, RouteResult
from .place_provider import PlaceProvider

logger = logging.getLogger(__name__)

MIN_PLACES = 2


class InsufficientWaypoints(ValueError):
    """Raised when a trip plan has fewer than two places; OSRM is never called."""

    def __init__(self, trip_plan_id: Any, place_count: int):
        self.trip_plan_id = trip_plan_id
        self.place_count = place_count
        super().__init__(
            f"Need at least {MIN_PLACES} places to create a route "
            f"(trip plan {trip_plan_id} has {place_count})"
        )


def reorder_place_ids(
        ids: Sequence[PlaceId],
        waypoints: Optional[List[Waypoint]],
        *,
        operation: EngineOperation = EngineOperation.TRIP,
        profile: TransportProfile = TransportProfile.DRIVING,
) -> List[PlaceId]:
    """
    Translate OSRM waypoints into place ids.

    Each waypoint's index is looked up in ids, in the order the waypoints came back.
    No waypoints means OSRM did not reorder anything: ids are returned as they are.

    An index outside [0, len(ids)) or a waypoint list that does not cover every
    place exactly once breaks the engine contract and raises EngineFailure.
    """
    if not waypoints:
        return list(ids)

    indices = [waypoint.waypoint_index for waypoint in waypoints]

    for index in indices:
        if not 0 <= index < len(ids):
            raise EngineFailure(
                operation, profile,
                f"waypoint index {index} outside 0..{len(ids) - 1}",
            )

    if sorted(indices) != list(range(len(ids))):
        raise EngineFailure(
            operation, profile,
            f"waypoint indices {indices} are not a permutation of {len(ids)} places",
        )

    return [ids[index] for index in indices]


class TripRoutingService:
    """
    Routes a trip plan through OSRM and reconciles the answer with place ids.

    Stateless between calls: both collaborators are injected and nothing is cached,
    so one instance can serve concurrent requests for different trip plans.
    """
    def __init__(self, place_provider: PlaceProvider, engine: OSRMClient):
        self.place_provider = place_provider
        self.engine = engine

    # --- Public API ---

    def route_by_trip_plan(self, trip_plan_id: Any, optimize: bool = False,
                           credential: Optional[str] = None) -> RouteResult:
        """
        Route the trip plan by car.

        optimize=False: visit the places in the planned order.
        optimize=True: let OSRM pick the visiting order (first and last place fixed).
        """
        places = self._fetch_places(trip_plan_id, credential)
        coords, ids = self._split(places)

        if optimize:
            result = self.engine.trip_optimize(coords)
            ordered_ids = reorder_place_ids(
                ids, result.waypoints,
                operation=result.operation, profile=result.profile,
            )
            if ordered_ids != ids:
                logger.debug("Trip plan %s reordered: %s -> %s", trip_plan_id, ids, ordered_ids)
        else:
            result = self.engine.route_keep_order(coords)
            ordered_ids = ids

        return self._to_route_result(result, ordered_ids)

    def route_by_mode(self, trip_plan_id: Any, profile: TransportProfile,
                      credential: Optional[str] = None) -> RouteResult:
        """
        Route the trip plan in its planned order for one transport mode. Never reorders.
        """
        profile = TransportProfile(profile)
        places = self._fetch_places(trip_plan_id, credential)
        coords, ids = self._split(places)

        result = self.engine.route_keep_order(coords, profile)
        return self._to_route_result(result, ids)

    def route_driving_by_trip_plan(self, trip_plan_id: Any,
                                   credential: Optional[str] = None) -> RouteResult:
        return self.route_by_mode(trip_plan_id, TransportProfile.DRIVING, credential)

    def route_walking_by_trip_plan(self, trip_plan_id: Any,
                                   credential: Optional[str] = None) -> RouteResult:
        return self.route_by_mode(trip_plan_id, TransportProfile.WALKING, credential)

    def route_cycling_by_trip_plan(self, trip_plan_id: Any,
                                   credential: Optional[str] = None) -> RouteResult:
        return self.route_by_mode(trip_plan_id, TransportProfile.CYCLING, credential)

    def route_all_modes(self, trip_plan_id: Any,
                        credential: Optional[str] = None) -> MultiModeRoute:
        """
        Distance and duration of the planned order for driving, walking and cycling.
        Places are fetched once; OSRM is asked once per mode.
        """
        places = self._fetch_places(trip_plan_id, credential)
        coords, _ = self._split(places)

        totals = {}
        for profile in TransportProfile:
            result = self.engine.route_keep_order(coords, profile)
            totals[profile] = ModeRoute(
                mode=profile,
                distance_meters=result.distance,
                duration_seconds=result.duration,
            )

        return MultiModeRoute(
            driving=totals[TransportProfile.DRIVING],
            walking=totals[TransportProfile.WALKING],
            cycling=totals[TransportProfile.CYCLING],
        )

    # --- helpers ---

    def _fetch_places(self, trip_plan_id: Any, credential: Optional[str]) -> List[Place]:
        places = self.place_provider.get_places(trip_plan_id, credential) or []
        if len(places) < MIN_PLACES:
            logger.info("Trip plan %s has %d places, not routing", trip_plan_id, len(places))
            raise InsufficientWaypoints(trip_plan_id, len(places))
        return places

    @staticmethod
    def _split(places: List[Place]) -> Tuple[List[LonLat], List[PlaceId]]:
        #same index alignment: coords[i] belongs to ids[i]
        coords = [place.lon_lat for place in places]
        ids = [place.id for place in places]
        return coords, ids

    @staticmethod
    def _to_route_result(result: EngineResult, ordered_ids: List[PlaceId]) -> RouteResult:
        return RouteResult(
            distance_meters=result.distance,
            duration_seconds=result.duration,
            geometry=result.geometry,
            ordered_place_ids=ordered_ids,
        )
