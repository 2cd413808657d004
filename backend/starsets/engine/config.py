"""Scene configuration — every tunable constant of the composition."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SceneConfig:
    """Constants per layer. Ranges are (low, high) for a uniform draw."""

    # Ground: bottom fraction of the canvas, flattened to the horizon saturation
    ground_height_pct: float = 0.15
    horizon_saturation: float = 20.0
    ground_gradient_top_offset: float = 10.0
    ground_gradient_bottom_inset: float = 20.0

    # Sun: diameter interpolated from gasUsed/gasLimit, as fractions of width
    sun_min_pct: float = 0.5
    sun_max_pct: float = 1.0
    sun_band_pct: float = 0.4  # vertical band above the horizon, x sun diameter
    sun_min_saturation: float = 85.0
    sun_lightness: float = 85.0

    # Sky: bottom colour is the sun hue, saturated, slightly darker than the sun
    sky_bottom_saturation: float = 100.0
    sky_bottom_darken: float = 5.0

    # Moons
    moons_max: int = 4
    moon_pool_multiplier: int = 4
    moon_min_lightness: float = 70.0
    moon_diameter_pct: tuple[float, float] = (0.02, 0.20)
    moon_dim_lightness: float = 18.0
    moon_max_saturation: float = 50.0

    # Rings
    ring_x1_pct: tuple[float, float] = (-0.1, 1.0)
    ring_x2_pct: tuple[float, float] = (0.0, 1.1)
    ring_y1_pct: float = 1.1
    ring_y2_pct: float = -0.1
    ring_adjust_pct: tuple[float, float] = (1.0, 1.5)
    ring_max_width_pct: float = 0.1
    ring_lightness: tuple[float, float] = (50.0, 100.0)
    ring_alpha: tuple[float, float] = (0.2, 0.5)

    # Mountain
    mountain_x_res: tuple[float, float] = (10.0, 30.0)
    mountain_height_scale: tuple[float, float] = (50.0, 100.0)
    mountain_noise_scale: tuple[float, float] = (0.01, 0.03)
    mountain_slope: tuple[float, float] = (-3.0, 3.0)
    mountain_tightness: float = 0.1
    mountain_noise_x_offset: float = 0.0
    mountain_base_pct: float = 0.10
    mountain_slope_lift: float = 0.01

    # Coherent noise
    noise_octaves: int = 4
    noise_falloff: float = 0.5

    @property
    def moon_pool_size(self) -> int:
        """Quadruples drawn up front regardless of how many moons are shown."""
        return self.moons_max * self.moon_pool_multiplier
