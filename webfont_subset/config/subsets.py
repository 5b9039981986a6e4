"""
Named subset definitions for font subsetting.

Each subset maps to a list of Unicode range tokens (``U+XXXX`` or
``U+XXXX-YYYY``). The groupings follow the subsets served by Google Fonts.

Reference: https://www.unicode.org/charts/
"""

LATIN = [
    "U+0-FF",  # Basic Latin + Latin-1 Supplement
    "U+131",  # dotless i
    "U+152",  # OE
    "U+153",  # oe
    "U+2BB",  # modifier letter turned comma
    "U+2BC",  # modifier letter apostrophe
    "U+2C6",  # circumflex accent
    "U+2DA",  # ring above
    "U+2DC",  # small tilde
    "U+300",  # combining grave
    "U+301",  # combining acute
    "U+303",  # combining tilde
    "U+304",  # combining macron
    "U+308",  # combining diaeresis
    "U+309",  # combining hook above
    "U+323",  # combining dot below
    "U+329",  # combining vertical line below
    "U+2000-206F",  # General Punctuation
    "U+2074",  # superscript four
    "U+20AC",  # euro sign
    "U+2122",  # trade mark sign
    "U+2190-2193",  # arrows
    "U+2212",  # minus sign
    "U+2215",  # division slash
    "U+FEFF",  # zero width no-break space
    "U+FFFD",  # replacement character
]

LATIN_EXT = [
    "U+0100-02AF",  # Latin Extended-A, Latin Extended-B, IPA Extensions
    "U+0300-0301",
    "U+0303-0304",
    "U+0308-0309",
    "U+0323",
    "U+0329",
    "U+1E00-1EFF",  # Latin Extended Additional
    "U+2020",  # dagger
    "U+20A0-20AB",  # currency symbols
    "U+20AD-20CF",  # currency symbols
    "U+2113",  # script small l
    "U+2C60-2C7F",  # Latin Extended-C
    "U+A720-A7FF",  # Latin Extended-D
]

GREEK = [
    "U+0370-03FF",  # Greek and Coptic
]

GREEK_EXT = [
    "U+1F00-1FFF",  # Greek Extended
]

CYRILLIC = [
    "U+0301",
    "U+0400-045F",  # Cyrillic (basic)
    "U+0490-0491",  # Ghe with upturn
    "U+04B0-04B1",  # straight U
    "U+2116",  # numero sign
]

CYRILLIC_EXT = [
    "U+0460-052F",  # Cyrillic (historic) + Cyrillic Supplement
    "U+1C80-1C88",  # Cyrillic Extended-C
    "U+20B4",  # hryvnia sign
    "U+2DE0-2DFF",  # Cyrillic Extended-A
    "U+A640-A69F",  # Cyrillic Extended-B
    "U+FE2E-FE2F",  # combining titlo halves
]

VIETNAMESE = [
    "U+0102-0103",
    "U+0110-0111",
    "U+0128-0129",
    "U+0168-0169",
    "U+01A0-01A1",
    "U+01AF-01B0",
    "U+0300-0301",
    "U+0303-0304",
    "U+0308-0309",
    "U+0323",
    "U+0329",
    "U+1EA0-1EF9",  # Vietnamese letters with diacritics
    "U+20AB",  # dong sign
]

SUBSET_RANGES = {
    "latin": LATIN,
    "latin-ext": LATIN_EXT,
    "greek": GREEK,
    "greek-ext": GREEK_EXT,
    "cyrillic": CYRILLIC,
    "cyrillic-ext": CYRILLIC_EXT,
    "vietnamese": VIETNAMESE,
}

# Long-form names accepted on the command line
SUBSET_ALIASES = {
    "latin-extended": "latin-ext",
    "greek-extended": "greek-ext",
    "cyrillic-extended": "cyrillic-ext",
}
