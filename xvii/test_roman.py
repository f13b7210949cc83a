import copy
import operator
import pickle

import pytest

import xvii
from .decoder import decode
from .encoder import Case, RomanFormatter
from .errors import InvalidOrder, OutOfRange, RangeError
from .ladder import MAX_VALUE, MIN_VALUE, STANDARD, Ceiling
from .roman import Roman, parse


def test_roman():
    seventeen = Roman.parse("XVII")
    assert seventeen.value == 17
    assert str(seventeen) == "XVII"

    seventeen = Roman(17)
    assert seventeen.value == 17
    assert str(seventeen) == "XVII"
    assert repr(seventeen) == "Roman(17)"


@pytest.mark.parametrize("value", [MIN_VALUE, 42, MAX_VALUE])
def test_try_new(value):
    assert Roman.try_new(value).value == value


@pytest.mark.parametrize("value", [0, -1, MAX_VALUE + 1, 65536])
def test_try_new_out_of_range(value):
    with pytest.raises(RangeError) as excinfo:
        Roman.try_new(value)

    assert excinfo.value.value == value
    assert (excinfo.value.min_value, excinfo.value.max_value) == (1, 4999)
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("value", [1.0, "17", None])
def test_try_new_needs_an_integer(value):
    with pytest.raises(TypeError):
        Roman(value)


def test_new_unchecked():
    assert Roman.new_unchecked(0).value == 0
    assert Roman.new_unchecked(0).to_uppercase() == ""
    assert str(Roman.new_unchecked(-7)) == ""
    assert str(Roman.new_unchecked(5003)) == "MMMMMIII"
    assert Roman.new_unchecked(42) == Roman(42)


def test_case():
    assert Roman(42).to_uppercase() == "XLII"
    assert Roman(42).to_lowercase() == "xlii"


def test_format():
    value = Roman(12)
    formatter = value.format(Case.LOWER)
    assert isinstance(formatter, RomanFormatter)
    assert str(formatter) == "xii"
    assert f"{value.format(Case.UPPER)}" == "XII"
    assert str(value.format()) == "XII"


def test_ordering_and_equality():
    assert Roman(4) < Roman(5) <= Roman(5) < Roman(4999)
    assert Roman(9) > Roman(1)
    assert Roman(17) == Roman.parse("xvii")
    assert Roman(17) != Roman(18)
    assert Roman(17) != 17
    assert sorted([Roman(10), Roman(2), Roman(7)]) == [Roman(2), Roman(7), Roman(10)]
    assert len({Roman(3), Roman(3), Roman.parse("III")}) == 1

    with pytest.raises(TypeError):
        Roman(1) < 2


def test_integer_conversions():
    value = Roman(1994)
    assert int(value) == 1994
    assert operator.index(value) == 1994
    assert [0, 1, 2][Roman(2)] == 2


def test_immutable():
    value = Roman(3)
    with pytest.raises(AttributeError):
        value._value = 4
    with pytest.raises(AttributeError):
        value.other = 4
    with pytest.raises(AttributeError):
        del value._value
    assert value.value == 3


def test_copy_and_pickle():
    value = Roman(1994)
    assert copy.copy(value) == value
    assert copy.deepcopy(value) == value
    assert pickle.loads(pickle.dumps(value)) == value
    assert pickle.loads(pickle.dumps(Roman.new_unchecked(0))).value == 0


def test_parse():
    assert parse("MCMXCIV") == Roman(1994)

    with pytest.raises(InvalidOrder):
        parse("IXI")

    with pytest.raises(OutOfRange):
        parse("MMMM", STANDARD)
    assert parse("MMMM").value == 4000


def test_public_api():
    assert xvii.Roman is Roman
    assert xvii.parse("xvii").value == 17
    assert xvii.to_roman(17) == "XVII"
    assert (xvii.MIN_VALUE, xvii.MAX_VALUE) == (1, 4999)
    assert xvii.CEILING is xvii.EXTENDED


def test_parse_keeps_value_in_range():
    """A wider ceiling still cannot produce a Roman past MAX_VALUE."""
    wide = Ceiling("wide", 9999)
    assert decode("MMMMMM", wide) == 6000

    with pytest.raises(RangeError) as excinfo:
        Roman.parse("MMMMMM", wide)
    assert excinfo.value.value == 6000

    with pytest.raises(RangeError):
        parse("MMMMMM", wide)
    assert Roman.parse("MMMMCMXCIX", wide) == Roman(MAX_VALUE)
