import numpy as np


def brightness(rgb) -> np.ndarray:
    """Rounded unweighted mean of the R, G and B channels, 0-255.

    Works on a single (r, g, b) triple or any array with channels last.
    A sum of three integers never lands on .5, so integer rounding is exact.
    """
    total = np.asarray(rgb, dtype=np.int64)[..., :3].sum(axis=-1)
    return (total + 1) // 3


def quantize(value, levels: int, invert: bool = False) -> np.ndarray:
    """Map brightness values onto indices of a ramp with ``levels`` entries."""
    if levels < 1:
        raise ValueError(f"Ramp must have at least one entry, got {levels}")
    top = levels - 1
    index = np.floor(np.asarray(value, dtype=np.float64) / 255 * top).astype(np.int64)
    if invert:
        index = top - index
    return np.clip(index, 0, top)
