"""
Marker-digit classes and key reduction

key2 is the full code stream. key1 and key0 are derived from it by deleting
marker digits, never letters:

    key2  everything
    key1  drops doubling and vowel-quality markers (keeps 0, 1, 3)
    key0  also drops the hard/retroflex marker (keeps 0, 3)
"""

from enum import Enum
from typing import FrozenSet, Tuple
import regex


class MarkerClass(Enum):
    """Semantic class of a digit embedded in a code"""
    SPECIAL = 'special'     # 0 - dental geminate, never removed
    HARD = 'hard'           # 1 - hard/retroflex articulation
    DOUBLING = 'doubling'   # 2 - consonant gemination
    VOWEL = 'vowel'         # 3-9 - vowel length, diphthong, nasalisation


DIGIT_CLASSES = {
    '0': MarkerClass.SPECIAL,
    '1': MarkerClass.HARD,
    '2': MarkerClass.DOUBLING,
    '3': MarkerClass.VOWEL,
    '4': MarkerClass.VOWEL,
    '5': MarkerClass.VOWEL,
    '6': MarkerClass.VOWEL,
    '7': MarkerClass.VOWEL,
    '8': MarkerClass.VOWEL,
    '9': MarkerClass.VOWEL,
}

# The short-i marker survives every reduction
RETAINED_DIGITS = frozenset('3')


def digits_of(*classes: MarkerClass) -> FrozenSet[str]:
    """All digits belonging to any of the given classes"""
    return frozenset(d for d, c in DIGIT_CLASSES.items() if c in classes)


KEY1_DROPPED = digits_of(MarkerClass.DOUBLING, MarkerClass.VOWEL) - RETAINED_DIGITS
KEY0_DROPPED = digits_of(MarkerClass.HARD, MarkerClass.DOUBLING, MarkerClass.VOWEL) - RETAINED_DIGITS


def _deletion_pattern(digits: FrozenSet[str]):
    return regex.compile('[' + ''.join(sorted(digits)) + ']')


_KEY1_PATTERN = _deletion_pattern(KEY1_DROPPED)
_KEY0_PATTERN = _deletion_pattern(KEY0_DROPPED)


def strip_markers(key: str, dropped: FrozenSet[str]) -> str:
    """Delete every digit in dropped from key"""
    if not dropped:
        return key
    return _deletion_pattern(dropped).sub('', key)


def reduce_key(key2: str) -> Tuple[str, str]:
    """
    Derive the broader keys from a full key

    Args:
        key2: Fully substituted code stream (A-Z, 0-9)

    Returns:
        (key0, key1)

    Example:
        >>> reduce_key('PNT14')
        ('PNT', 'PNT1')
    """
    key1 = _KEY1_PATTERN.sub('', key2)
    key0 = _KEY0_PATTERN.sub('', key2)
    return key0, key1
