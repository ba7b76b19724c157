from dataclasses import dataclass
from enum import Enum

from pixeltext.charsets import ASCII_RAMPS, BLOCK_RAMPS
from pixeltext.errors import UnsupportedLevel

MIN_WIDTH = 20
MAX_WIDTH = 120
SPREADSHEET_MAX_WIDTH = 100


class SpreadsheetFormat(str, Enum):
    BLOCKS = "blocks"
    HEX = "hex"
    RGB = "rgb"


class DosMode(str, Enum):
    AUTO = "auto"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ConversionSettings:
    """Options for one conversion run. Invert flags are independent per output."""

    width: int = 80
    charset: str = "simple"
    invert: bool = True
    spreadsheet_format: SpreadsheetFormat = SpreadsheetFormat.BLOCKS
    block_levels: int = 5
    invert_spreadsheet: bool = True
    dos_mode: DosMode = DosMode.AUTO
    invert_assembly: bool = True

    def __post_init__(self):
        if self.width < 1:
            raise ValueError(f"Width must be at least 1, got {self.width}")
        if self.charset not in ASCII_RAMPS:
            raise ValueError(f"Unknown charset: {self.charset!r}")
        if self.block_levels not in BLOCK_RAMPS:
            raise UnsupportedLevel(self.block_levels)
        # Frozen, so coerce plain strings through object.__setattr__
        object.__setattr__(self, "spreadsheet_format", SpreadsheetFormat(self.spreadsheet_format))
        object.__setattr__(self, "dos_mode", DosMode(self.dos_mode))

    @property
    def spreadsheet_width(self) -> int:
        return min(self.width, SPREADSHEET_MAX_WIDTH)
