import io

import numpy as np
import pytest
from PIL import Image


def solid_image(width, height, colour=(255, 255, 255), mode="RGB"):
    return Image.new(mode, (width, height), colour)


def image_from_rows(rows):
    """Build an RGB image from nested lists of (r, g, b) triples."""
    return Image.fromarray(np.array(rows, dtype=np.uint8))


def png_bytes(image):
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def gradient_image():
    """Left-to-right greyscale ramp, 40x20 pixels."""
    arr = np.zeros((20, 40, 3), dtype=np.uint8)
    arr[:, :, :] = np.linspace(0, 255, 40, dtype=np.uint8)[None, :, None]
    return Image.fromarray(arr)
