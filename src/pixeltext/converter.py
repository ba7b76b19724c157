from pathlib import Path

from PIL import Image

from pixeltext.assembly import emit_assembly
from pixeltext.encoders import AsciiEncoder, SpreadsheetEncoder
from pixeltext.engine import Encoder
from pixeltext.sampling import load_image, sample_grid
from pixeltext.settings import ConversionSettings

ImageSource = Image.Image | bytes | str | Path


def _render(image: ImageSource, encoder: Encoder, width: int) -> str:
    grid = sample_grid(load_image(image), width)
    return encoder.encode(grid)


def image_to_ascii(image: ImageSource, settings: ConversionSettings | None = None) -> str:
    settings = settings or ConversionSettings()
    return _render(image, AsciiEncoder(settings.charset, settings.invert), settings.width)


def image_to_spreadsheet(image: ImageSource, settings: ConversionSettings | None = None) -> str:
    """Encode an image as CSV; the grid is never wider than 100 columns."""
    settings = settings or ConversionSettings()
    encoder = SpreadsheetEncoder(settings.spreadsheet_format, settings.block_levels, settings.invert_spreadsheet)
    return _render(image, encoder, settings.spreadsheet_width)


def spreadsheet_to_assembly(text: str | None, settings: ConversionSettings | None = None) -> str:
    """Translate block CSV text into a DOS program. Raises NoInputData on empty text."""
    settings = settings or ConversionSettings()
    return emit_assembly(text, settings.dos_mode, settings.invert_assembly)
