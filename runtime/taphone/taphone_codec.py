"""
TAphone (Tamil phone) Encoder

Phonetic hashing of Tamil words, in the spirit of Metaphone/Soundex.
A word is transliterated into a Roman code stream and reduced into three
keys of decreasing specificity:

    key0  broad: letters plus the 0/3 markers
    key1  adds the hard/retroflex marker
    key2  adds doubling and vowel-quality markers

Pipeline (each code is grouped between { and } until the final step so a
later pass can't re-match text that was already substituted):

    filter -> compounds -> consonants -> vowels -> modifiers -> cleanup

Within each glyph class an occurrence followed by a modifier is replaced
before the bare occurrences.

Words should be encoded one at a time; whitespace is dropped by the
script filter, so a phrase collapses into one meaningless key.
"""

from functools import lru_cache
from typing import List, Mapping, NamedTuple, Optional, Tuple
import logging
import unicodedata
import regex

from .glyphs import DEFAULT_TABLES, GlyphTables, filter_script, is_tamil_char
from .keys import reduce_key

logger = logging.getLogger(__name__)

# Error codes
E_TABLE_KEY = "E_TABLE_KEY"
E_TABLE_CODE = "E_TABLE_CODE"
E_INVALID_INPUT = "E_INVALID_INPUT"

GROUP_OPEN = '{'
GROUP_CLOSE = '}'

_GLYPH_CODE = regex.compile(r'[A-Z]*[0-9]*')
_MODIFIER_CODE = regex.compile(r'[0-9]*')
_NON_ALPHANUMERIC = regex.compile(r'[^0-9A-Z]')


class TAphoneError(Exception):
    """Malformed glyph table or misuse of the encoder"""
    pass


class PhoneticKeys(NamedTuple):
    """The three keys of a word, broadest first"""
    key0: str
    key1: str
    key2: str


EMPTY_KEYS = PhoneticKeys('', '', '')


def _alternation(keys) -> str:
    # Longest first so a cluster is never split by a shorter key
    ordered = sorted(keys, key=lambda k: (-len(k), k))
    return '|'.join(regex.escape(k) for k in ordered)


def _group(code: str) -> str:
    return GROUP_OPEN + code + GROUP_CLOSE


class TAphone:
    """Encodes Tamil words to TAphone phonetic keys"""

    def __init__(self, tables: GlyphTables = DEFAULT_TABLES, normalize: bool = False):
        """
        Validate the glyph tables and compile the match patterns

        Build once and reuse; encode() is safe to call from many threads.

        Args:
            tables: Glyph tables to encode with
            normalize: Compose decomposed vowel signs (NFC) before matching

        Raises:
            TAphoneError: If a table key or code is malformed
        """
        _validate_tables(tables)
        self.tables = tables
        self.normalize = normalize

        mods = _alternation(tables.modifiers) if tables.modifiers else None
        self._mod_compounds = self._compile_modified(tables.compounds, mods)
        self._mod_consonants = self._compile_modified(tables.consonants, mods)
        self._mod_vowels = self._compile_modified(tables.vowels, mods)

        self._compounds = self._compile_bare(tables.compounds)
        self._consonants = self._compile_bare(tables.consonants)
        self._vowels = self._compile_bare(tables.vowels)
        self._modifiers = self._compile_bare(tables.modifiers)

        logger.debug(
            f"TAphone ready: {len(tables.compounds)} compounds, "
            f"{len(tables.consonants)} consonants, {len(tables.vowels)} vowels, "
            f"{len(tables.modifiers)} modifiers"
        )

    @staticmethod
    def _compile_modified(glyphs: Mapping[str, str], mods: Optional[str]):
        """Glyph immediately followed by a modifier (the modifier is not consumed)"""
        if not glyphs or mods is None:
            return None
        return regex.compile(f'(?:{_alternation(glyphs)})(?=(?:{mods}))')

    @staticmethod
    def _compile_bare(glyphs: Mapping[str, str]):
        if not glyphs:
            return None
        return regex.compile(_alternation(glyphs))

    def encode(self, word: Optional[str]) -> PhoneticKeys:
        """
        Encode a Tamil word to its three phonetic keys

        Never fails on string input: characters that map to nothing are
        skipped, so an empty or non-Tamil word gives three empty keys.

        Args:
            word: A single Tamil word

        Returns:
            PhoneticKeys(key0, key1, key2)

        Raises:
            TAphoneError: If word is not a string

        Example:
            >>> TAphone().encode('தமிழ்')
            PhoneticKeys(key0='TM3Z', key1='T1M3Z', key2='T1M3Z')
        """
        if word is None:
            return EMPTY_KEYS
        if not isinstance(word, str):
            raise TAphoneError(f"{E_INVALID_INPUT}: Cannot encode type {type(word).__name__}")

        # key2 accounts for hard and modified sounds
        key2 = self._process(word)
        key0, key1 = reduce_key(key2)

        keys = PhoneticKeys(key0, key1, key2)
        logger.debug(f"Encoded {word!r} -> {keys}")
        return keys

    def trace(self, word: str) -> List[Tuple[str, str]]:
        """
        Snapshot the working text after every pipeline stage

        Args:
            word: A single Tamil word

        Returns:
            [(stage_name, text), ...] in pipeline order; the last text is key2
        """
        stages = []
        self._process(word, stages)
        return stages

    def _process(self, text: str, stages: Optional[list] = None) -> str:
        """Transliterate to the full code stream (key2)"""
        def record(name):
            if stages is not None:
                stages.append((name, text))

        if self.normalize:
            text = unicodedata.normalize('NFC', text)
        text = filter_script(text)
        record('filter')

        t = self.tables

        text = self._replace(text, t.compounds, self._mod_compounds)
        record('modified_compounds')
        text = self._replace(text, t.compounds, self._compounds)
        record('compounds')

        text = self._replace(text, t.consonants, self._mod_consonants)
        record('modified_consonants')
        text = self._replace(text, t.vowels, self._mod_vowels)
        record('modified_vowels')

        text = self._replace(text, t.consonants, self._consonants)
        record('consonants')
        text = self._replace(text, t.vowels, self._vowels)
        record('vowels')

        # Modifiers become bare digits, no grouping needed
        if self._modifiers is not None:
            text = self._modifiers.sub(lambda m: t.modifiers[m.group()], text)
        record('modifiers')

        # Losing the grouping and anything that matched nothing
        text = _NON_ALPHANUMERIC.sub('', text)
        record('cleanup')
        return text

    @staticmethod
    def _replace(text: str, glyphs: Mapping[str, str], pattern) -> str:
        """Replace every match of pattern with its grouped code"""
        if pattern is None:
            return text
        return pattern.sub(lambda m: _group(glyphs[m.group()]), text)


def _validate_tables(tables: GlyphTables) -> None:
    """Reject keys outside the Tamil script and codes outside [A-Z]*[0-9]*"""
    for name in ('vowels', 'consonants', 'compounds'):
        for glyph, code in getattr(tables, name).items():
            _check_key(name, glyph)
            if not code or not _GLYPH_CODE.fullmatch(code):
                raise TAphoneError(f"{E_TABLE_CODE}: Invalid {name} code {code!r} for {glyph!r}")

    for glyph, code in tables.modifiers.items():
        _check_key('modifiers', glyph)
        if len(glyph) != 1:
            raise TAphoneError(f"{E_TABLE_KEY}: Modifier {glyph!r} must be a single character")
        if not _MODIFIER_CODE.fullmatch(code):
            raise TAphoneError(f"{E_TABLE_CODE}: Invalid modifiers code {code!r} for {glyph!r}")


def _check_key(name: str, glyph: str) -> None:
    if not isinstance(glyph, str) or not glyph:
        raise TAphoneError(f"{E_TABLE_KEY}: Empty key in {name}")
    if not all(is_tamil_char(c) for c in glyph):
        raise TAphoneError(f"{E_TABLE_KEY}: Non-Tamil key {glyph!r} in {name}")


# Convenience functions

@lru_cache(maxsize=1)
def get_default_encoder() -> TAphone:
    """Shared encoder over the default tables, built on first use"""
    return TAphone()


def encode_taphone(word: Optional[str]) -> PhoneticKeys:
    """
    Encode a Tamil word with the shared default encoder

    Args:
        word: A single Tamil word

    Returns:
        PhoneticKeys(key0, key1, key2)

    Example:
        >>> encode_taphone('பந்து')
        PhoneticKeys(key0='PNT', key1='PNT1', key2='PNT14')
    """
    return get_default_encoder().encode(word)
