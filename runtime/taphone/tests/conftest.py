"""
Pytest configuration and fixtures for taphone tests.
"""

import pytest

from taphone import TAphone


# (word, key0, key1, key2)
REFERENCE_WORDS = [
    ('தமிழ்', 'TM3Z', 'T1M3Z', 'T1M3Z'),                      # tamiz
    ('தமிழ்மொழி', 'TM3ZMZ3', 'T1M3ZMZ3', 'T1M3ZM7Z3'),      # tamizmozhi
    ('பந்து', 'PNT', 'PNT1', 'PNT14'),                        # bandhu
    ('பந்தயம்', 'PNTYM', 'PNT1YM', 'PNT1YM'),                # bandhayam
]


@pytest.fixture(scope="session")
def encoder():
    """
    Provide a shared TAphone encoder for all tests.

    Using session scope since pattern compilation only needs to happen once.
    """
    return TAphone()


@pytest.fixture
def reference_words():
    return list(REFERENCE_WORDS)


@pytest.fixture
def sample_words():
    """A spread of words covering compounds, modifiers and hard consonants."""
    return [
        'தமிழ்', 'தமிழ்மொழி', 'பந்து', 'பந்தயம்',
        'அக்கா', 'பத்து', 'பள்ளி', 'அம்மா', 'லக்ஷ்மி',
        'கொடை', 'வீடு', 'நீர்', 'ஔவை', 'கற்றல்', 'இன்னும்',
    ]
