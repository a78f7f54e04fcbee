"""
Tamil glyph tables for TAphone

Static mappings from Tamil script characters (and clusters) to the Roman
codes that make up a phonetic key. A code is a run of uppercase letters
optionally followed by marker digits (see keys.py for the digit classes).

Four tables, all read-only:
    VOWELS      independent vowels (uyir)
    CONSONANTS  base consonants (mei), inherent 'a'
    COMPOUNDS   geminate / irregular clusters, matched before their parts
    MODIFIERS   dependent vowel signs, only ever attached to a glyph
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional
import regex

# Virama (pulli) - joins the consonants of a cluster, carries no code
PULLI = '்'

# Independent vowels (uyir)
VOWELS = MappingProxyType({
    'அ': 'A',     # U+0B85
    'ஆ': 'A',     # U+0B86
    'இ': 'I',     # U+0B87
    'ஈ': 'I',     # U+0B88
    'உ': 'U',     # U+0B89
    'ஊ': 'U',     # U+0B8A
    'எ': 'E',     # U+0B8E
    'ஏ': 'E',     # U+0B8F
    'ஐ': 'AI',    # U+0B90
    'ஒ': 'O',     # U+0B92
    'ஓ': 'O',     # U+0B93
    'ஔ': 'O',     # U+0B94
})

# Base consonants (mei); hard/retroflex variants carry the '1' marker
CONSONANTS = MappingProxyType({
    'க': 'K',     # U+0B95
    'ங': 'NG',    # U+0B99
    'ச': 'C',     # U+0B9A
    'ஞ': 'NJ',    # U+0B9E
    'ட': 'T',     # U+0B9F
    'ண': 'N',     # U+0BA3
    'த': 'T1',    # U+0BA4 - dental
    'ந': 'N',     # U+0BA8
    'ப': 'P',     # U+0BAA
    'ம': 'M',     # U+0BAE
    'ய': 'Y',     # U+0BAF
    'ர': 'R',     # U+0BB0
    'ல': 'L',     # U+0BB2
    'வ': 'V',     # U+0BB5
    'ழ': 'Z',     # U+0BB4
    'ள': 'L',     # U+0BB3
    'ற': 'R1',    # U+0BB1 - trill
    'ன': 'N1',    # U+0BA9 - alveolar
})

# Consonant clusters (consonant + pulli + consonant). '2' marks gemination,
# '0' is the standalone marker for the dental geminate.
COMPOUNDS = MappingProxyType({
    'க்க': 'K2',
    'ங்ங': 'NG',
    'ச்ச': 'C2',
    'ஜ்ஜ': 'J',
    'ஞ்ஞ': 'NJ',
    'ட்ட': 'T2',
    'ண்ண': 'N2',
    'த்த': '0',
    'ந்ந': 'NN',
    'ன்ன': 'NN',
    'ப்ப': 'P2',
    'ம்ம': 'M2',
    'ய்ய': 'Y',
    'ல்ல': 'L2',
    'வ்வ': 'V',
    'ஶ்ஶ': 'S1',
    'ஸ்ஸ': 'S',
    'ள்ள': 'L12',
    'க்ஷ': 'KS1',
})

# Dependent vowel signs. Length, diphthong and nasal quality become digits.
MODIFIERS = MappingProxyType({
    'ா': '',      # U+0BBE - aa
    'ி': '3',     # U+0BBF - i
    'ீ': '3',     # U+0BC0 - ii
    'ு': '4',     # U+0BC1 - u
    'ூ': '4',     # U+0BC2 - uu
    'ெ': '5',     # U+0BC6 - e
    'ே': '5',     # U+0BC7 - ee
    'ை': '6',     # U+0BC8 - ai
    'ொ': '7',     # U+0BCA - o
    'ோ': '7',     # U+0BCB - oo
    'ௌ': '8',     # U+0BCC - au
    'ஂ': '9',     # U+0B82 - anusvara
})

# Merged view of all four tables (their keys never overlap)
ALL_GLYPHS = MappingProxyType({
    **MODIFIERS,
    **VOWELS,
    **CONSONANTS,
    **COMPOUNDS,
})

_NON_TAMIL = regex.compile(r'\P{Script=Tamil}')
_TAMIL_CHAR = regex.compile(r'\p{Script=Tamil}')


@dataclass(frozen=True)
class GlyphTables:
    """The four lookup tables an encoder is built from."""
    vowels: Mapping[str, str] = field(default_factory=lambda: VOWELS)
    consonants: Mapping[str, str] = field(default_factory=lambda: CONSONANTS)
    compounds: Mapping[str, str] = field(default_factory=lambda: COMPOUNDS)
    modifiers: Mapping[str, str] = field(default_factory=lambda: MODIFIERS)

    def __post_init__(self):
        # Freeze caller-supplied dicts so the encoder's view never changes
        for name in ('vowels', 'consonants', 'compounds', 'modifiers'):
            table = getattr(self, name)
            if not isinstance(table, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(table)))


DEFAULT_TABLES = GlyphTables()


def filter_script(text: str) -> str:
    """
    Remove every character outside the Tamil script

    Whitespace and punctuation go too, so the words of a phrase are
    concatenated rather than separated.

    Args:
        text: Arbitrary text

    Returns:
        Only the Tamil characters of text, in order
    """
    return _NON_TAMIL.sub('', text)


def is_tamil_char(char: str) -> bool:
    """Check if a single character belongs to the Tamil script"""
    return len(char) == 1 and _TAMIL_CHAR.match(char) is not None


def get_glyph_code(glyph: str) -> Optional[str]:
    """Get the Roman code of a glyph, cluster or modifier (None if unmapped)"""
    for table in (COMPOUNDS, CONSONANTS, VOWELS, MODIFIERS):
        if glyph in table:
            return table[glyph]
    return None


def format_glyphs(text: str) -> str:
    """Pretty-print Tamil text one character per line with its code"""
    lines = []
    for char in text:
        code = ALL_GLYPHS.get(char)
        if code is None:
            lines.append(f"{char}  # U+{ord(char):04X} (unmapped)")
        else:
            lines.append(f"{char}  # U+{ord(char):04X} {code!r}")
    return "\n".join(lines)
