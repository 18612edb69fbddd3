"""Static lookup data shared by the encoders and decoders."""

from types import MappingProxyType

# Variation Selectors block carries bytes 0-15, the supplement carries 16-255
VARIATION_SELECTOR_START = 0xFE00
VARIATION_SELECTOR_END = 0xFE0F
VARIATION_SELECTOR_SUPPLEMENT_START = 0xE0100
VARIATION_SELECTOR_SUPPLEMENT_END = 0xE01EF

HOMOGLYPHS = MappingProxyType(
    {
        "-": "‐",  # hyphen-minus -> hyphen
        ";": ";",  # semicolon -> greek question mark
        "C": "Ⅽ",  # C -> roman numeral one hundred
        "D": "Ⅾ",  # D -> roman numeral five hundred
        "K": "K",  # K -> kelvin sign
        "L": "Ⅼ",  # L -> roman numeral fifty
        "M": "Ⅿ",  # M -> roman numeral one thousand
        "V": "Ⅴ",  # V -> roman numeral five
        "X": "Ⅹ",  # X -> roman numeral ten
        "c": "ⅽ",  # c -> small roman numeral one hundred
        "d": "ⅾ",  # d -> small roman numeral five hundred
        "i": "ⅰ",  # i -> small roman numeral one
        "j": "ј",  # j -> cyrillic je
        "l": "ⅼ",  # l -> small roman numeral fifty
        "v": "ⅴ",  # v -> small roman numeral five
        "x": "ⅹ",  # x -> small roman numeral ten
    }
)

HOMOGLYPH_VALUES = frozenset(HOMOGLYPHS.values())

ELIGIBLE_CHARS = frozenset(HOMOGLYPHS) | HOMOGLYPH_VALUES


__all__ = [
    "VARIATION_SELECTOR_START",
    "VARIATION_SELECTOR_END",
    "VARIATION_SELECTOR_SUPPLEMENT_START",
    "VARIATION_SELECTOR_SUPPLEMENT_END",
    "HOMOGLYPHS",
    "HOMOGLYPH_VALUES",
    "ELIGIBLE_CHARS",
]
