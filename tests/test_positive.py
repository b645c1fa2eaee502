import pytest

from rustdrills.drills.positive import (
    CreationError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    parse_pos_nonzero,
)


def test_creation_positive():
    assert PositiveNonzeroInteger(10).value == 10


def test_creation_negative():
    with pytest.raises(CreationError) as info:
        PositiveNonzeroInteger(-10)
    assert info.value == CreationError(CreationError.NEGATIVE)


def test_creation_zero():
    with pytest.raises(CreationError) as info:
        PositiveNonzeroInteger(0)
    assert info.value == CreationError(CreationError.ZERO)


def test_creation_error_messages():
    assert str(CreationError(CreationError.NEGATIVE)) == "number is negative"
    assert str(CreationError(CreationError.ZERO)) == "number is zero"


def test_unknown_creation_kind():
    with pytest.raises(TypeError):
        CreationError("huge")


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert info.value.is_creation is False
    assert str(info.value) == "invalid digit found in string"


def test_parse_empty():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("")
    assert str(info.value) == "cannot parse integer from empty string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert info.value.error == CreationError(CreationError.NEGATIVE)


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert info.value.error == CreationError(CreationError.ZERO)


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)


def test_too_large():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("9223372036854775808")
    assert str(info.value) == "number too large to fit in target type"