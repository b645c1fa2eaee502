import pytest

from rustdrills.drills.options import maybe_icecream


def test_check_icecream():
    assert maybe_icecream(9) == 5
    assert maybe_icecream(10) == 5
    assert maybe_icecream(23) == 0
    assert maybe_icecream(22) == 0
    assert maybe_icecream(25) is None


def test_raw_value():
    icecreams = maybe_icecream(12)
    assert icecreams == 5


def test_hour_twenty_four_still_answers():
    assert maybe_icecream(24) == 0


def test_negative_hour_raises():
    with pytest.raises(ValueError):
        maybe_icecream(-1)