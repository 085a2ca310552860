"""Map tile values to cell colours using logarithmic scaling of the lightness."""

from colorsys import hls_to_rgb

from matplotlib.colors import to_hex
from numpy import clip, log2

from game2048.config import WindowConfig


def cell_lightness(value: int, min_lightness: float, max_lightness: float, max_tile: int = 2048) -> float:
    """
    Lightness of a cell holding the given value.

    Parameters
    ----------
    value : int
        Tile value, 0 for an empty cell.
    min_lightness : float
        Lightness reached by ``max_tile`` and larger tiles.
    max_lightness : float
        Lightness of an empty cell.
    max_tile : int, optional
        Tile value mapped to ``min_lightness``, by default 2048.

    Returns
    -------
    float
        Lightness between ``min_lightness`` and ``max_lightness``.

    Notes
    -----
    - The interpolation ratio is ``log2(value) / log2(max_tile)``, clipped to [0, 1].
    - Empty cells are the brightest.
    """
    if value == 0:
        return max_lightness
    ratio = float(clip(log2(value) / log2(max_tile), 0.0, 1.0))
    return max_lightness - (max_lightness - min_lightness) * ratio


def cell_color(value: int, config: WindowConfig | None = None) -> str:
    """
    Hex colour of a cell holding the given value.

    Parameters
    ----------
    value : int
        Tile value, 0 for an empty cell.
    config : WindowConfig, optional
        Hue, saturation and lightness bounds; defaults to ``WindowConfig()``.

    Returns
    -------
    str
        Colour as ``#rrggbb``.
    """
    config = config or WindowConfig()
    lightness = cell_lightness(value, config.min_lightness, config.max_lightness, config.max_tile)
    return to_hex(hls_to_rgb(config.hue, lightness, config.saturation))
