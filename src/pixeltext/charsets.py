from types import MappingProxyType

LIGHT_SHADE = "░"
MEDIUM_SHADE = "▒"
DARK_SHADE = "▓"
FULL_BLOCK = "█"

# Character ramps for ASCII art, index 0 is the lightest/emptiest glyph
ASCII_RAMPS = MappingProxyType(
    {
        "simple": " .:-=+*#%@",
        "detailed": " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$",
        "blocks": " " + LIGHT_SHADE + MEDIUM_SHADE + DARK_SHADE + FULL_BLOCK,
        "dots": " ·•●",
    }
)

BLOCK_CHARS = ("", LIGHT_SHADE, MEDIUM_SHADE, DARK_SHADE, FULL_BLOCK)

# Spreadsheet block ramps keyed by level count
BLOCK_RAMPS = MappingProxyType(
    {
        2: ("", FULL_BLOCK),
        3: ("", LIGHT_SHADE, FULL_BLOCK),
        4: ("", LIGHT_SHADE, DARK_SHADE, FULL_BLOCK),
        5: BLOCK_CHARS,
    }
)

# DOS renders white on black, so "auto" flips the shade order to keep the picture's tones
AUTO_DOS_BYTES = MappingProxyType(
    {
        FULL_BLOCK: 32,
        DARK_SHADE: 176,
        MEDIUM_SHADE: 177,
        LIGHT_SHADE: 178,
        " ": 219,
        "": 219,
    }
)

CUSTOM_DOS_BYTES = MappingProxyType(
    {
        LIGHT_SHADE: 176,
        MEDIUM_SHADE: 177,
        DARK_SHADE: 178,
        FULL_BLOCK: 219,
        " ": 32,
        "": 32,
    }
)

CUSTOM_DOS_BYTES_INVERTED = MappingProxyType(
    {
        **CUSTOM_DOS_BYTES,
        LIGHT_SHADE: 178,
        DARK_SHADE: 176,
    }
)

FALLBACK_BYTE = 32
