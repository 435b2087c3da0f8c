"""
Route a trip plan from the command line.

Run from an environment where the project is installed (pip install -e .).
Wires the pieces together the way a service would at startup:
settings (.env) -> one shared requests.Session -> OSRMClient + UserServicePlaceProvider
-> TripRoutingService, then prints the RouteResult as JSON.

    python scripts/route_trip_plan.py 7 --optimize --token "$JWT"
    python scripts/route_trip_plan.py 7 --mode walking
    python scripts/route_trip_plan.py 7 --all-modes
"""
import argparse
import json
import logging
import os
import sys
from typing import List, Optional

import requests

from routing.osrm_client import EngineFailure, OSRMClient
from routing.models import TransportProfile
from routing.settings import RoutingSettings
from trips.place_provider import UserServicePlaceProvider
from trips.routing_service import InsufficientWaypoints, TripRoutingService

logger = logging.getLogger("route_trip_plan")


def build_service(settings: RoutingSettings, session: requests.Session) -> TripRoutingService:
    engine = OSRMClient(
        base_url=settings.osrm_base_url,
        session=session,
        timeout=settings.osrm_timeout_seconds,
    )
    place_provider = UserServicePlaceProvider(
        base_url=settings.user_service_url,
        session=session,
        timeout=settings.user_service_timeout_seconds,
    )
    return TripRoutingService(place_provider=place_provider, engine=engine)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Route a trip plan through OSRM.")
    parser.add_argument("trip_plan_id", type=int)
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--optimize", action="store_true",
                       help="let OSRM choose the visiting order (driving, first/last fixed)")
    group.add_argument("--mode", choices=[profile.value for profile in TransportProfile],
                       help="keep the planned order and route for this transport mode")
    group.add_argument("--all-modes", action="store_true",
                       help="compare driving, walking and cycling totals")
    parser.add_argument("--token", default=os.getenv("TRIP_PLANNER_JWT"),
                        help="bearer token forwarded to user-service")
    parser.add_argument("--env-file", default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    settings = RoutingSettings.from_env(args.env_file)

    with requests.Session() as session:
        service = build_service(settings, session)
        try:
            if args.all_modes:
                payload = service.route_all_modes(args.trip_plan_id, args.token).to_dict()
            elif args.mode:
                payload = service.route_by_mode(
                    args.trip_plan_id, TransportProfile(args.mode), args.token
                ).to_dict()
            else:
                payload = service.route_by_trip_plan(
                    args.trip_plan_id, args.optimize, args.token
                ).to_dict()
        except InsufficientWaypoints as exc:
            logger.error("%s", exc)
            return 2
        except EngineFailure as exc:
            logger.error("%s", exc)
            return 1

    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
