"""Mini README: Tests for the geometry primitives.

Covers distance and proximity properties, heading projection conventions,
point-in-polygon behaviour for convex and concave polygons (including the
boundary convention) and region validation.
"""

from __future__ import annotations

import math

import pytest

from droneroute.exceptions import InvalidRegion
from droneroute.geometry import (
    CLOSE_THRESHOLD,
    HOVER,
    MOVE_DISTANCE,
    Position,
    Region,
    distance,
    headings,
    goal_is_sealed,
    is_close,
    is_in_region,
    project,
)

APPLETON = Position(-3.186874, 55.944494)
OTHER = Position(-3.192473, 55.942617)

SQUARE = Region(
    "square",
    (Position(0.0, 0.0), Position(2.0, 0.0), Position(2.0, 2.0), Position(0.0, 2.0)),
)
L_SHAPE = Region(
    "l-shape",
    (
        Position(0.0, 0.0),
        Position(4.0, 0.0),
        Position(4.0, 2.0),
        Position(2.0, 2.0),
        Position(2.0, 4.0),
        Position(0.0, 4.0),
    ),
)


def test_distance_to_self_is_zero_and_close() -> None:
    assert distance(APPLETON, APPLETON) == 0
    assert is_close(APPLETON, APPLETON)


def test_distance_is_symmetric() -> None:
    assert distance(APPLETON, OTHER) == distance(OTHER, APPLETON)
    assert distance(Position(0.0, 0.0), Position(3.0, 4.0)) == pytest.approx(5.0)


def test_is_close_uses_strict_threshold() -> None:
    assert is_close(APPLETON, Position(APPLETON.longitude + CLOSE_THRESHOLD * 0.9, APPLETON.latitude))
    assert not is_close(APPLETON, Position(APPLETON.longitude + CLOSE_THRESHOLD * 1.1, APPLETON.latitude))


@pytest.mark.parametrize("heading", headings())
def test_project_moves_exactly_one_step(heading: float) -> None:
    moved = project(APPLETON, heading)
    assert distance(APPLETON, moved) == pytest.approx(MOVE_DISTANCE, abs=1e-12)


def test_project_hover_returns_same_position() -> None:
    hovered = project(APPLETON, HOVER)
    assert hovered == APPLETON
    assert hovered.longitude == APPLETON.longitude
    assert hovered.latitude == APPLETON.latitude


def test_project_uses_compass_bearings() -> None:
    north = project(APPLETON, 0.0)
    east = project(APPLETON, 90.0)
    south_west = project(APPLETON, 225.0)

    assert north.latitude == pytest.approx(APPLETON.latitude + MOVE_DISTANCE)
    assert north.longitude == pytest.approx(APPLETON.longitude)
    assert east.longitude == pytest.approx(APPLETON.longitude + MOVE_DISTANCE)
    assert east.latitude == pytest.approx(APPLETON.latitude)
    assert south_west.longitude < APPLETON.longitude
    assert south_west.latitude < APPLETON.latitude


def test_headings_cover_the_compass_evenly() -> None:
    compass = headings()
    assert len(compass) == 16
    assert compass[0] == 0.0
    assert compass[4] == 90.0
    assert all(math.isclose(b - a, 22.5) for a, b in zip(compass, compass[1:]))
    with pytest.raises(ValueError):
        headings(0)


def test_positions_compare_with_tolerance() -> None:
    noisy = Position(APPLETON.longitude + 1e-15, APPLETON.latitude - 1e-15)
    assert noisy == APPLETON
    assert hash(noisy) == hash(APPLETON)
    assert Position(APPLETON.longitude + 1e-9, APPLETON.latitude) != APPLETON


@pytest.mark.parametrize(
    ("first", "second"),
    [
        (Position(4.9e-13, 0.0), Position(5.1e-13, 0.0)),
        (Position(0.1 + 0.2, 0.0), Position(0.3, 0.0)),
        (Position(1e-15, -1e-15), Position(0.0, 0.0)),
    ],
)
def test_equal_positions_share_a_hash(first: Position, second: Position) -> None:
    assert (first == second) is (first.key() == second.key())
    assert len({first, second}) == (1 if first == second else 2)
    if first == second:
        assert hash(first) == hash(second)


@pytest.mark.parametrize(
    ("point", "expected"),
    [
        (Position(1.0, 1.0), True),
        (Position(3.0, 1.0), False),
        (Position(-0.5, 1.0), False),
        (Position(1.0, 2.5), False),
    ],
)
def test_convex_containment_is_rotation_invariant(point: Position, expected: bool) -> None:
    for offset in range(len(SQUARE.vertices)):
        assert is_in_region(point, SQUARE.rotated(offset)) is expected


@pytest.mark.parametrize(
    ("point", "expected"),
    [
        (Position(1.0, 1.0), True),
        (Position(3.0, 1.0), True),
        (Position(1.0, 3.0), True),
        (Position(1.0, 2.0), True),
        (Position(3.0, 3.0), False),
        (Position(5.0, 1.0), False),
        (Position(-1.0, 2.0), False),
    ],
)
def test_concave_containment_is_rotation_invariant(point: Position, expected: bool) -> None:
    for offset in range(len(L_SHAPE.vertices)):
        assert is_in_region(point, L_SHAPE.rotated(offset)) is expected


@pytest.mark.parametrize(
    "point",
    [
        Position(4.0, 1.0),
        Position(3.0, 2.0),
        Position(2.0, 3.0),
        Position(0.0, 0.0),
        Position(2.0, 2.0),
        Position(0.0, 2.5),
    ],
)
def test_points_on_the_boundary_count_as_inside(point: Position) -> None:
    for offset in range(len(L_SHAPE.vertices)):
        assert is_in_region(point, L_SHAPE.rotated(offset))


def test_region_requires_three_vertices() -> None:
    with pytest.raises(InvalidRegion):
        Region("line", (Position(0.0, 0.0), Position(1.0, 1.0)))


def test_region_rejects_self_intersection() -> None:
    with pytest.raises(InvalidRegion):
        Region(
            "bowtie",
            (Position(0.0, 0.0), Position(1.0, 1.0), Position(1.0, 0.0), Position(0.0, 1.0)),
        )


def test_region_drops_repeated_closing_vertex() -> None:
    closed = Region(
        "closed",
        (
            Position(0.0, 0.0),
            Position(2.0, 0.0),
            Position(2.0, 2.0),
            Position(0.0, 2.0),
            Position(0.0, 0.0),
        ),
    )
    assert len(closed.vertices) == 4
    assert closed.vertices == SQUARE.vertices


def test_region_from_rest_payload() -> None:
    region = Region.from_dict(
        {
            "name": "George Square Area",
            "vertices": [
                {"lng": -3.190578818321228, "lat": 55.94402412577528},
                {"lng": -3.1899887323379517, "lat": 55.94284650540911},
                {"lng": -3.187097311019897, "lat": 55.94328811724263},
                {"lng": -3.187682032585144, "lat": 55.944477740393744},
                {"lng": -3.190578818321228, "lat": 55.94402412577528},
            ],
        }
    )
    assert region.name == "George Square Area"
    assert len(region.vertices) == 4
    assert is_in_region(Position(-3.1888, 55.9437), region)

    with pytest.raises(InvalidRegion):
        Region.from_dict({"name": "broken"})


def test_region_rejects_collapsed_polygon() -> None:
    with pytest.raises(InvalidRegion):
        Region("flat", (Position(0.0, 0.0), Position(1.0, 0.0), Position(2.0, 0.0)))


def test_region_polygon_matches_vertices() -> None:
    assert SQUARE.polygon.area == pytest.approx(4.0)
    assert SQUARE.rotated(2).polygon.equals(SQUARE.polygon)
    assert Region("square", SQUARE.vertices) == SQUARE


def box(name: str, lng_min: float, lat_min: float, lng_max: float, lat_max: float) -> Region:
    return Region(
        name,
        (
            Position(lng_min, lat_min),
            Position(lng_max, lat_min),
            Position(lng_max, lat_max),
            Position(lng_min, lat_max),
        ),
    )


def walls_around(centre: Position, gap: float = 0.00005, reach: float = 0.001) -> list:
    lng, lat = centre.longitude, centre.latitude
    return [
        box("North", lng - reach, lat + gap, lng + reach, lat + reach),
        box("South", lng - reach, lat - reach, lng + reach, lat - gap),
        box("West", lng - reach, lat - gap, lng - gap, lat + gap),
        box("East", lng + gap, lat - gap, lng + reach, lat + gap),
    ]


def test_goal_is_sealed_detects_walled_destination() -> None:
    walls = walls_around(APPLETON)
    assert goal_is_sealed(OTHER, APPLETON, walls)


def test_goal_is_sealed_allows_an_opening() -> None:
    walls = walls_around(APPLETON)
    assert not goal_is_sealed(OTHER, APPLETON, walls[:3])
    assert not goal_is_sealed(OTHER, APPLETON, [])


def test_goal_is_sealed_when_destination_is_covered() -> None:
    lng, lat = APPLETON.longitude, APPLETON.latitude
    zone = box("Roof", lng - 0.001, lat - 0.001, lng + 0.001, lat + 0.001)
    assert goal_is_sealed(OTHER, APPLETON, [zone])


def test_goal_is_sealed_when_start_shares_the_enclosure() -> None:
    walls = walls_around(APPLETON, gap=0.0005)
    inside = Position(APPLETON.longitude + 0.0003, APPLETON.latitude)
    assert not goal_is_sealed(inside, APPLETON, walls)
