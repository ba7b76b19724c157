import io
import logging
import math
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from pixeltext.engine import CellGrid
from pixeltext.errors import InvalidImage

logger = logging.getLogger(__name__)

# Character cells are roughly twice as tall as wide
CELL_ASPECT = 0.5


def load_image(source: Image.Image | bytes | str | Path) -> Image.Image:
    """Decode raw bytes or a file path into an RGB image.

    Fully transparent pixels are read as black, the way a canvas reports them.
    """
    if isinstance(source, Image.Image):
        image = source
    else:
        if isinstance(source, bytes):
            source = io.BytesIO(source)
        try:
            image = Image.open(source)
            image.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise InvalidImage(f"Could not decode image: {exc}") from exc

    if image.width == 0 or image.height == 0:
        raise InvalidImage(f"Image has a zero dimension: {image.width}x{image.height}")

    if image.mode in ("RGBA", "LA", "PA") or "transparency" in image.info:
        rgba = np.array(image.convert("RGBA"))
        rgba[rgba[:, :, 3] == 0, :3] = 0
        return Image.fromarray(np.ascontiguousarray(rgba[:, :, :3]))
    return image.convert("RGB")


def grid_size(image_width: int, image_height: int, width: int) -> tuple[int, int]:
    """Return (cols, rows) for a target column count, keeping the aspect ratio."""
    if image_width == 0 or image_height == 0:
        raise InvalidImage(f"Image has a zero dimension: {image_width}x{image_height}")
    rows = math.floor(width * (image_height / image_width) * CELL_ASPECT)
    return width, rows


def sample_grid(image: Image.Image, width: int) -> CellGrid:
    """Box-resample an RGB image down to one pixel per character cell."""
    cols, rows = grid_size(image.width, image.height, width)
    logger.debug("sampling %dx%d image onto %dx%d grid", image.width, image.height, cols, rows)
    if rows == 0:
        return CellGrid(rgb=np.zeros((0, cols, 3), dtype=np.uint8))
    resized = image.convert("RGB").resize((cols, rows), Image.BOX)
    return CellGrid(rgb=np.asarray(resized, dtype=np.uint8))
