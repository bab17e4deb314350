import pytest

from vendnav.api.errors import EmptyCandidateSetError
from vendnav.api.geometry import haversine_km
from vendnav.api.models import Coordinate
from vendnav.api.planner import nearest, plan_route

ORIGIN = Coordinate(0.0, 0.0)


@pytest.fixture
def scattered(stop_factory):
    return [
        stop_factory(0.0, 1.0, id="east1"),
        stop_factory(0.0, 5.0, id="east5"),
        stop_factory(0.0, 2.0, id="east2"),
        stop_factory(1.5, 0.0, id="north"),
        stop_factory(-0.5, -3.0, id="southwest"),
        stop_factory(2.0, 2.0, id="northeast"),
    ]


def test_nearest_first_then_next_nearest(stop_factory):
    candidates = [stop_factory(0, 1), stop_factory(0, 5), stop_factory(0, 2)]
    route = plan_route(ORIGIN, candidates, 2)
    assert [s.coordinate for s in route] == [Coordinate(0, 1), Coordinate(0, 2)]


def test_ties_keep_pool_order(stop_factory):
    first = stop_factory(1, 0, id="first")
    second = stop_factory(1, 0, id="second")
    route = plan_route(ORIGIN, [first, second], 2)
    assert [s.id for s in route] == ["first", "second"]


@pytest.mark.parametrize("n", [0, 1, 5])
def test_empty_candidates_give_empty_route(n):
    assert plan_route(ORIGIN, [], n) == []


def test_zero_stops_gives_empty_route(scattered):
    assert plan_route(ORIGIN, scattered, 0) == []


@pytest.mark.parametrize("n", [1, 3, 6, 10])
def test_route_length_is_capped(scattered, n):
    assert len(plan_route(ORIGIN, scattered, n)) == min(n, len(scattered))


def test_route_is_a_subset_without_duplicates(scattered):
    route = plan_route(ORIGIN, scattered, 10)
    assert len({id(s) for s in route}) == len(route)
    assert all(any(s is c for c in scattered) for s in route)


def test_each_step_picks_closest_remaining(scattered):
    route = plan_route(ORIGIN, scattered, len(scattered))
    remaining = list(scattered)
    current = ORIGIN
    for chosen in route:
        best = min(haversine_km(current, c.coordinate) for c in remaining)
        assert haversine_km(current, chosen.coordinate) == best
        remaining.remove(chosen)
        current = chosen.coordinate


def test_candidates_are_not_mutated(scattered):
    before = list(scattered)
    plan_route(ORIGIN, scattered, 3)
    assert scattered == before


def test_accepts_tuples(stop_factory):
    candidates = (stop_factory(0, 2), stop_factory(0, 1))
    assert plan_route(ORIGIN, candidates, 1)[0].coordinate == Coordinate(0, 1)


def test_negative_max_stops_rejected(scattered):
    with pytest.raises(ValueError):
        plan_route(ORIGIN, scattered, -1)


def test_nearest_matches_single_stop_route(scattered):
    assert nearest(ORIGIN, scattered) is plan_route(ORIGIN, scattered, 1)[0]
    assert nearest(ORIGIN, scattered).id == "east1"


def test_nearest_with_no_candidates_raises():
    with pytest.raises(EmptyCandidateSetError):
        nearest(ORIGIN, [])


def test_near_antipodal_candidate(stop_factory):
    start = Coordinate(0.08, 0.0)
    far = stop_factory(-0.08, 180.0, id="far")
    assert plan_route(start, [far], 1) == [far]
    assert nearest(start, [far]) is far
