"""
TAphone - phonetic keys for Tamil words

Generates three Romanized phonetic keys of varying phonetic proximity for a
Tamil word, for spelling-tolerant search and indexing:

- key0: broad hash comparable to a Metaphone key (no hard sounds, no modifiers)
- key1: slightly narrower, accounts for hard sounds
- key2: narrowest, accounts for hard sounds and phonetic modifiers

Usage:
    from taphone import TAphone

    tp = TAphone()
    key0, key1, key2 = tp.encode('தமிழ்')   # ('TM3Z', 'T1M3Z', 'T1M3Z')
"""

__version__ = '1.0.0'

# ============================================================================
# Glyph Tables
# ============================================================================

from .glyphs import (
    VOWELS, CONSONANTS, COMPOUNDS, MODIFIERS, ALL_GLYPHS, PULLI,
    GlyphTables, DEFAULT_TABLES,
    filter_script, is_tamil_char, get_glyph_code, format_glyphs,
)

# ============================================================================
# Key Reduction
# ============================================================================

from .keys import (
    MarkerClass, DIGIT_CLASSES, RETAINED_DIGITS,
    KEY0_DROPPED, KEY1_DROPPED,
    digits_of, strip_markers, reduce_key,
)

# ============================================================================
# Encoder
# ============================================================================

from .taphone_codec import (
    TAphone, TAphoneError, PhoneticKeys, EMPTY_KEYS,
    E_TABLE_KEY, E_TABLE_CODE, E_INVALID_INPUT,
    encode_taphone, get_default_encoder,
)

# ============================================================================
# Exports
# ============================================================================

__all__ = [
    # Version
    '__version__',

    # Glyph tables
    'VOWELS', 'CONSONANTS', 'COMPOUNDS', 'MODIFIERS', 'ALL_GLYPHS', 'PULLI',
    'GlyphTables', 'DEFAULT_TABLES',
    'filter_script', 'is_tamil_char', 'get_glyph_code', 'format_glyphs',

    # Key reduction
    'MarkerClass', 'DIGIT_CLASSES', 'RETAINED_DIGITS',
    'KEY0_DROPPED', 'KEY1_DROPPED',
    'digits_of', 'strip_markers', 'reduce_key',

    # Encoder
    'TAphone', 'TAphoneError', 'PhoneticKeys', 'EMPTY_KEYS',
    'encode_taphone', 'get_default_encoder',

    # Errors
    'E_TABLE_KEY', 'E_TABLE_CODE', 'E_INVALID_INPUT',
]
