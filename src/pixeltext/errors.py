class ConversionError(ValueError):
    """Base class for failures of a single conversion call."""


class InvalidImage(ConversionError):
    """The source image could not be decoded or has a zero dimension."""


class NoInputData(ConversionError):
    """The assembly stage was given no spreadsheet text."""


class UnsupportedLevel(ConversionError):
    """The requested block level count has no ramp."""

    def __init__(self, levels: int):
        super().__init__(f"Unsupported block level count: {levels} (expected 2, 3, 4 or 5)")
        self.levels = levels
