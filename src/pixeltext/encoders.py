import logging

from pixeltext.charsets import ASCII_RAMPS, BLOCK_RAMPS
from pixeltext.engine import CellGrid
from pixeltext.errors import UnsupportedLevel
from pixeltext.quantizer import brightness, quantize
from pixeltext.settings import SpreadsheetFormat

logger = logging.getLogger(__name__)

RGB_HEADER = "R,G,B"


class AsciiEncoder:
    """Maps each cell's brightness onto a character ramp."""

    def __init__(self, charset: str = "simple", invert: bool = True):
        if charset not in ASCII_RAMPS:
            raise ValueError(f"Unknown charset: {charset!r}")
        self.ramp = ASCII_RAMPS[charset]
        self.invert = invert

    def encode(self, grid: CellGrid) -> str:
        indices = quantize(brightness(grid.rgb), len(self.ramp), self.invert)
        lines = ["".join(self.ramp[i] for i in row) for row in indices]
        return "".join(line + "\n" for line in lines)


class SpreadsheetEncoder:
    """CSV encoder with block, hex and rgb variants.

    ``blocks`` and ``hex`` keep the grid shape (one line per row). ``rgb``
    writes a header and then one pixel per line.
    """

    def __init__(
        self,
        fmt: SpreadsheetFormat | str = SpreadsheetFormat.BLOCKS,
        block_levels: int = 5,
        invert: bool = True,
    ):
        self.fmt = SpreadsheetFormat(fmt)
        if block_levels not in BLOCK_RAMPS:
            raise UnsupportedLevel(block_levels)
        self.ramp = BLOCK_RAMPS[block_levels]
        self.invert = invert

    def _block_rows(self, grid: CellGrid) -> list[list[str]]:
        indices = quantize(brightness(grid.rgb), len(self.ramp), self.invert)
        return [[self.ramp[i] for i in row] for row in indices]

    def _hex_rows(self, grid: CellGrid) -> list[list[str]]:
        return [[f"#{r:02x}{g:02x}{b:02x}" for r, g, b in row.tolist()] for row in grid.rgb]

    def encode(self, grid: CellGrid) -> str:
        logger.debug("encoding %dx%d grid as %s", grid.cols, grid.rows, self.fmt.value)
        if self.fmt is SpreadsheetFormat.RGB:
            lines = [RGB_HEADER]
            lines.extend(f"{r},{g},{b}" for r, g, b in grid.rgb.reshape(-1, 3).tolist())
        else:
            rows = self._block_rows(grid) if self.fmt is SpreadsheetFormat.BLOCKS else self._hex_rows(grid)
            lines = [",".join(row) for row in rows]
        return "".join(line + "\n" for line in lines)
