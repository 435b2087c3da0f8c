import pytest

from routing.models import (
    PROFILE_PATH_SEGMENTS,
    RouteResponse,
    TransportProfile,
    TripResponse,
    Waypoint,
)
from trips.models import Place, RouteResult


def test_every_profile_has_a_path_segment():
    assert set(PROFILE_PATH_SEGMENTS) == set(TransportProfile)
    assert TransportProfile.DRIVING.path == "driving"
    assert TransportProfile.WALKING.path == "walking"
    assert TransportProfile.CYCLING.path == "cycling"


def test_place_coordinate_views():
    place = Place(id=10, lat=50.0, lon=19.9)

    assert place.lat_lon == (50.0, 19.9)
    assert place.lon_lat == (19.9, 50.0)


def test_place_from_json_requires_id():
    with pytest.raises(ValueError):
        Place.from_json({"lat": 1.0, "lon": 2.0})


def test_place_from_json_accepts_numeric_strings():
    place = Place.from_json({"id": 5, "lat": "50.0", "lon": "19.9"})

    assert place.lon_lat == (19.9, 50.0)
    assert place.display_name is None


def test_route_response_decoding():
    response = RouteResponse.from_json({
        "code": "Ok",
        "routes": [{"distance": 1.5, "duration": 2.5, "geometry": {"type": "LineString", "coordinates": []}}],
    })

    assert response.ok
    assert response.first().distance == 1.5
    assert response.first().geometry == {"type": "LineString", "coordinates": []}


def test_route_response_without_routes_is_not_ok():
    assert not RouteResponse.from_json({"code": "Ok"}).ok
    assert not RouteResponse.from_json({"code": "NoRoute", "routes": [{"distance": 1, "duration": 1}]}).ok


def test_trip_response_keeps_absent_waypoints_absent():
    response = TripResponse.from_json({
        "code": "Ok",
        "trips": [{"distance": 3.0, "duration": 4.0}],
        "waypoints": None,
    })

    assert response.ok
    assert response.waypoints is None
    assert response.first().geometry is None


def test_waypoint_from_json():
    waypoint = Waypoint.from_json({"waypoint_index": 2, "trips_index": 0, "name": "Floriańska",
                                   "location": [19.94, 50.06], "hint": "abc"})

    assert waypoint == Waypoint(waypoint_index=2, trips_index=0, name="Floriańska", location=(19.94, 50.06))


def test_waypoint_without_index_is_rejected():
    with pytest.raises(KeyError):
        Waypoint.from_json({"name": "x"})


def test_route_result_to_dict():
    result = RouteResult(distance_meters=123.4, duration_seconds=56.7, geometry=None,
                         ordered_place_ids=[3, 1, 2])

    assert result.to_dict() == {
        "distanceMeters": 123.4,
        "durationSeconds": 56.7,
        "geometry": None,
        "orderedPlaceIds": [3, 1, 2],
    }


@pytest.mark.parametrize("payload", ["error", 7, None, ["id", "lat", "lon"]])
def test_place_from_json_rejects_non_objects(payload):
    with pytest.raises(ValueError):
        Place.from_json(payload)


def test_waypoint_index_is_not_coerced():
    with pytest.raises(ValueError):
        Waypoint.from_json({"waypoint_index": 1.7})
    with pytest.raises(ValueError):
        Waypoint.from_json({"waypoint_index": False})


def test_trip_response_rejects_waypoints_object():
    with pytest.raises(ValueError):
        TripResponse.from_json({"code": "Ok", "trips": [{"distance": 1, "duration": 1}], "waypoints": {"a": 1}})
