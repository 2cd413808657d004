"""Tests for the palette catalog."""

import pytest

from starsets.engine.entropy import EntropySource
from starsets.engine.palettes import (
    PALETTES,
    ROLES,
    Palette,
    all_palettes,
    palette_index,
    select_palette,
)


def test_catalog_is_fixed():
    assert len(all_palettes()) == 7
    assert all_palettes()[0].name == "Genesis"
    assert all(len(p.colors) == 5 for p in PALETTES)


def test_palette_index_clamps():
    n = len(PALETTES)
    assert palette_index(0.0) == 0
    assert palette_index(0.1) == 0
    assert palette_index(0.5) == 3
    assert palette_index(1.0) == n - 1
    assert palette_index(1.5) == n - 1
    assert palette_index(-0.3) == 0


def test_select_palette_clamps():
    assert select_palette(99) is PALETTES[-1]
    assert select_palette(-1) is PALETTES[0]


@pytest.mark.parametrize("palette", PALETTES, ids=lambda p: p.name)
def test_shuffle_is_a_permutation(palette):
    src = EntropySource(0xDEADBEEF)
    shuffled = palette.shuffled(src)
    assert shuffled.name == palette.name
    assert len(shuffled.colors) == 5
    assert set(shuffled.colors) == set(palette.colors)
    assert src.draws == 4


def test_shuffle_leaves_catalog_untouched():
    before = PALETTES[0].colors
    PALETTES[0].shuffled(EntropySource(3))
    assert PALETTES[0].colors == before


def test_roles_follow_shuffled_positions():
    pal = PALETTES[2].shuffled(EntropySource(11))
    assert pal.sky == pal.colors[0]
    assert pal.ground == pal.colors[1]
    assert pal.sun == pal.colors[2]
    assert pal.mountain == pal.colors[3]
    assert pal.moon == pal.colors[4]
    for i, role in enumerate(ROLES):
        assert pal.role(role) == pal.colors[i]


def test_palette_needs_five_colours():
    with pytest.raises(ValueError):
        Palette.from_hex("short", "#000000", "#ffffff")
