"""Tests for colours and scene shapes."""

import pytest

from starsets.engine.palettes import PALETTES
from starsets.shapes.primitives import (
    RING_GLOW_ALPHA,
    Disc,
    GradientBand,
    RidgeTerrain,
    RingLine,
)
from starsets.utils.color import Color, is_hex_color, lerp_color
from starsets.utils.math_helpers import circles_collide, constrain, map_range

RED = Color.from_hex("#ff0000")
BLACK = Color.from_hex("#000000")
WHITE = Color.from_hex("#ffffff")


def test_hex_to_hsl():
    assert (RED.h, RED.s, RED.l, RED.a) == (0.0, 100.0, 50.0, 1.0)
    assert WHITE.l == 100.0
    assert BLACK.l == 0.0


def test_hex_round_trip_for_catalog_colours():
    for palette in PALETTES:
        for color in palette.colors:
            assert Color.from_hex(color.to_hex()) == color


def test_from_hex_rejects_garbage():
    with pytest.raises(ValueError):
        Color.from_hex("red")
    assert not is_hex_color("#12345")
    assert is_hex_color("#A0b1C2")


def test_from_hsl_wraps_and_clamps():
    c = Color.from_hsl(370, 120, -5, 2)
    assert c.h == pytest.approx(10)
    assert (c.s, c.l, c.a) == (100.0, 0.0, 1.0)


def test_with_alpha_is_a_copy():
    glow = RED.with_alpha(0.1)
    assert glow.a == 0.1
    assert RED.a == 1.0
    assert (glow.h, glow.s, glow.l) == (RED.h, RED.s, RED.l)


def test_css():
    assert RED.css() == "rgb(255,0,0)"
    assert RED.with_alpha(0.5).css() == "rgba(255,0,0,0.5)"


def test_lerp_endpoints_are_exact():
    assert lerp_color(RED, WHITE, 0.0) is RED
    assert lerp_color(RED, WHITE, 1.0) is WHITE
    assert lerp_color(RED, WHITE, -3) is RED
    assert lerp_color(RED, WHITE, 7) is WHITE


def test_lerp_midpoint_in_rgb():
    mid = lerp_color(BLACK, WHITE, 0.5)
    assert mid.s == pytest.approx(0.0)
    assert mid.l == pytest.approx(50.0)


def test_map_range():
    assert map_range(5, 0, 10, 0, 100) == 50
    assert map_range(20, 0, 10, 0, 100) == 200
    assert map_range(20, 0, 10, 0, 100, clamp=True) == 100
    assert map_range(0.15, 0, 1, 500, 0) == pytest.approx(425)
    assert map_range(3, 1, 1, 7, 9) == 7
    assert constrain(5, 10, 0) == 5


def test_gradient_endpoints():
    band = GradientBand(0, 100, RED, WHITE, 10, 60)
    assert band.color_at(10) == RED
    assert band.color_at(60) == WHITE
    assert band.color_at(0) == RED
    assert band.color_at(100) == WHITE
    assert band.color_at(35) not in (RED, WHITE)


def test_gradient_rows_inclusive():
    band = GradientBand(0, 10, RED, WHITE, 0, 10)
    rows = list(band.rows())
    assert len(rows) == 11
    assert rows[0] == (0, RED)
    assert rows[-1] == (10, WHITE)


def test_solid_band_uses_top_colour():
    band = GradientBand(0, 10, RED, WHITE, 5, 5)
    assert band.is_solid
    assert {c for _, c in band.rows()} == {RED}


def test_disc_overlap():
    sun = Disc(100, 100, 50, RED)
    assert sun.overlaps(Disc(100, 100, 50, WHITE))
    assert sun.overlaps(Disc(130, 100, 20, WHITE))
    # touching edges do not overlap
    assert not sun.overlaps(Disc(150, 100, 50, WHITE))
    assert not circles_collide(0, 0, 10, 10, 0, 10)


def test_ring_strokes():
    ring = RingLine(0, 110, 40, -10, 3, RED.with_alpha(0.4))
    strokes = list(ring.strokes())
    assert len(strokes) == 4 + 3
    glow = strokes[:4]
    body = strokes[4:]
    assert [s[0] for s in glow] == [-2, -1, 3, 4]
    assert all(s[4].a == RING_GLOW_ALPHA for s in glow)
    assert [s[0] for s in body] == [0, 1, 2]
    assert all(s[4] == ring.color for s in body)
    assert ring.color.a == 0.4


def _ridge(vertices):
    return RidgeTerrain(
        x_pos=-10,
        y_pos=300,
        vertices=tuple(vertices),
        tightness=0.1,
        color=WHITE,
        height=500,
    )


def test_ridge_points_and_outline():
    ridge = _ridge([(0, 0), (10, -20), (20, -5), (30, 0)])
    assert ridge.points() == [(-10, 300), (0, 280), (10, 295), (20, 300)]
    outline = ridge.outline()
    assert len(outline) == 6
    assert outline[-2] == (20, 800)
    assert outline[-1] == (-10, 800)
    poly = ridge.polygon()
    assert poly.is_valid
    assert poly.area > 30 * 500


def test_ridge_bezier_passes_through_points():
    ridge = _ridge([(0, 0), (10, -20), (20, -5), (30, 0)])
    segments = ridge.bezier_segments()
    pts = ridge.points()
    assert len(segments) == len(pts) - 1
    for (start, _, _, end), a, b in zip(segments, pts, pts[1:]):
        assert start == a
        assert end == b


def test_ridge_with_full_tightness_is_straight():
    ridge = RidgeTerrain(0, 0, ((0, 0), (10, 10)), 1.0, WHITE, 10)
    (start, c1, c2, end), = ridge.bezier_segments()
    assert c1 == start
    assert c2 == end


def test_empty_ridge():
    ridge = _ridge([])
    assert ridge.outline() == []
    assert ridge.polygon().is_empty
    assert ridge.bezier_segments() == []
