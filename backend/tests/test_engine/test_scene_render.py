"""End-to-end render properties: determinism, clamping, sizing, ordering."""

import json
import math

import pytest

from starsets.engine.palettes import PALETTES
from starsets.engine.pipeline import render
from starsets.exceptions import InvalidBlockData, InvalidModifier
from starsets.models.modifiers import PRESET, CanvasSize, Modifiers
from starsets.shapes.primitives import Disc, GradientBand, RidgeTerrain, RingLine
from tests.conftest import HASH_A, ONE_ETH, make_block


def _dump(result) -> str:
    return json.dumps({"scene": result.scene.to_dict(), **result.metadata()}, sort_keys=True)


def test_render_is_deterministic(sample_block):
    first = render(sample_block)
    second = render(sample_block)
    assert _dump(first) == _dump(second)
    assert first.scene == second.scene


def test_preset_defaults_match_explicit_modifiers(sample_block):
    explicit = Modifiers(mod1=0.025, mod2=0.1, mod3=0.8, color1="#503752", background="#000000")
    assert explicit == PRESET
    assert _dump(render(sample_block, explicit)) == _dump(render(sample_block))


def test_seed_sensitivity():
    for pos in (2, 9, 17):
        ch = HASH_A[pos]
        altered = HASH_A[:pos] + ("0" if ch != "0" else "f") + HASH_A[pos + 1:]
        a = render(make_block([ONE_ETH, 2 * ONE_ETH], hash=HASH_A))
        b = render(make_block([ONE_ETH, 2 * ONE_ETH], hash=altered))
        layers_a = {k: v for k, v in a.scene.to_dict().items() if k != "seed"}
        layers_b = {k: v for k, v in b.scene.to_dict().items() if k != "seed"}
        assert layers_a != layers_b


def test_last_palette_at_mod2_one():
    result = render(make_block([ONE_ETH]), Modifiers(mod2=1.0))
    assert result.scene.palette_name == PALETTES[-1].name


@pytest.mark.parametrize(
    "mod3,expected",
    [(0.0, 0), (0.25, 1), (0.5, 2), (0.8, 3), (1.0, 4), (1.7, 4), (-0.5, 0)],
)
def test_moon_count(mod3, expected):
    result = render(make_block([ONE_ETH]), Modifiers(mod3=mod3))
    assert len(result.scene.moons) == expected


def test_ring_order_and_widths():
    result = render(make_block([5, 0, 20, 3]))
    rings = result.scene.rings.rings
    assert len(rings) == 3
    widths = [r.width for r in rings]
    # 10% of a 500px canvas for the largest value
    assert widths[1] == 50
    assert widths[1] == max(widths)
    assert widths == [11, 50, 6]


def test_single_unit_value_gets_minimum_width():
    result = render(make_block([1]))
    assert [r.width for r in result.scene.rings.rings] == [1]


def test_no_rings_when_no_value():
    result = render(make_block([0, 0, 0]))
    assert result.scene.rings.rings == ()


def test_sun_diameter_bounds():
    empty = render(make_block(gas_used=0, gas_limit=30_000_000))
    full = render(make_block(gas_used=30_000_000, gas_limit=30_000_000))
    assert empty.scene.sun.diameter == 250
    assert full.scene.sun.diameter == 500


def test_sun_sits_just_above_horizon(sample_block):
    scene = render(sample_block).scene
    horizon = scene.ground.top_y
    assert horizon - scene.sun.diameter * 0.4 <= scene.sun.y <= horizon
    assert 0 <= scene.sun.x <= scene.width
    assert scene.sun.color.l == 85
    assert scene.sun.color.s >= 85


def test_layer_geometry(sample_block):
    scene = render(sample_block, canvas=CanvasSize(width=400, height=600)).scene
    assert scene.ground.top_y == pytest.approx(510)
    assert scene.ground.bottom_y == 600
    assert scene.sky.top_y == 0
    assert scene.sky.bottom_y == pytest.approx(509)
    assert scene.sky.bottom_color_y == scene.sun.y
    assert scene.ground.top_color.s == 20
    assert scene.mountain.color.s == 20


def test_sky_bottom_tracks_sun(sample_block):
    scene = render(sample_block).scene
    assert scene.sky.bottom_color.h == pytest.approx(scene.sun.color.h)
    assert scene.sky.bottom_color.s == 100
    assert scene.sky.bottom_color.l == pytest.approx(80)


def test_gradient_endpoints_exact(sample_block):
    scene = render(sample_block).scene
    sky = scene.sky
    assert sky.color_at(sky.top_color_y) == sky.top_color
    assert sky.color_at(sky.bottom_color_y) == sky.bottom_color


def test_ring_axis_crosses_canvas(sample_block):
    scene = render(sample_block).scene
    group = scene.rings
    assert not (group.x1 < 0 and group.x2 < 0)
    assert not (group.x1 > scene.width and group.x2 > scene.width)
    for ring in group.rings:
        assert 50 <= ring.color.l <= 100
        assert 0.2 <= ring.color.a <= 0.5


def test_zero_spread_keeps_rings_on_axis():
    scene = render(make_block([ONE_ETH, 3 * ONE_ETH]), Modifiers(mod1=0.0)).scene
    for ring in scene.rings.rings:
        assert ring.x1 == scene.rings.x1
        assert ring.x2 == scene.rings.x2


def test_mountain_spans_canvas(sample_block):
    scene = render(sample_block).scene
    pts = scene.mountain.points()
    xs = [x for x, _ in pts]
    assert xs == sorted(xs)
    assert xs[0] < 0
    assert xs[-1] >= scene.width


def test_shape_order(sample_block):
    scene = render(sample_block).scene
    kinds = [type(s) for s in scene.shapes()]
    n_moons = len(scene.moons)
    n_rings = len(scene.rings.rings)
    assert kinds == (
        [GradientBand, Disc]
        + [Disc] * n_moons
        + [RingLine] * n_rings
        + [RidgeTerrain, GradientBand]
    )
    assert scene.shapes()[0] is scene.sky
    assert scene.shapes()[-1] is scene.ground


def test_background_is_modifier_colour(sample_block):
    scene = render(sample_block, Modifiers(background="#102030")).scene
    assert scene.background.to_hex() == "#102030"


def test_zero_gas_limit_raises():
    with pytest.raises(InvalidBlockData):
        render(make_block(gas_limit=0))


def test_bad_hash_raises():
    with pytest.raises(InvalidBlockData):
        render(make_block(hash="0xabc"))


@pytest.mark.parametrize(
    "modifiers",
    [
        Modifiers(mod1=math.nan),
        Modifiers(mod2=math.inf),
        Modifiers(background="black"),
        Modifiers(color1="#12345"),
    ],
)
def test_invalid_modifiers_raise(modifiers):
    with pytest.raises(InvalidModifier):
        render(make_block([ONE_ETH]), modifiers)


def test_out_of_range_modifiers_are_clamped():
    result = render(make_block([ONE_ETH]), Modifiers(mod1=4.0, mod2=-2.0, mod3=9.0))
    assert result.scene.palette_name == PALETTES[0].name
    assert len(result.scene.moons) == 4
    assert result.scene.rings.spread == 500
