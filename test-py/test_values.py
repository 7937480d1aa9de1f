import math
import pickle
from copy import copy, deepcopy

import pytest

from hashparams.core.errors import InvalidParameterError
from hashparams.core.values import Absent, AbsentType, stringify, typeCast


@pytest.mark.parametrize(
    "token, expectedValue",
    [
        ("0", 0.0),
        ("12", 12.0),
        ("-3", -3.0),
        ("1.5", 1.5),
        ("-0.25", -0.25),
        ("10.", 10.0),
        ("true", True),
        ("false", False),
        ("null", None),
        ("", ""),
        ("abc", "abc"),
        ("True", "True"),
        ("1e3", "1e3"),
        (".5", ".5"),
        ("1.2.3", "1.2.3"),
        ("+1", "+1"),
        (" 1", " 1"),
        ("1\n", "1\n"),
        ("١", "١"),  # non-ASCII digits stay text
    ],
)
def test_typeCast(token, expectedValue):
    value = typeCast(token)
    assert expectedValue == value
    assert type(expectedValue) is type(value)


def test_typeCast_undefined():
    assert typeCast("undefined") is Absent


@pytest.mark.parametrize(
    "value, expectedText",
    [
        ("text", "text"),
        ("", ""),
        (None, "null"),
        (Absent, "undefined"),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (42, "42"),
        (-7, "-7"),
        (1.0, "1"),
        (-2.0, "-2"),
        (1.5, "1.5"),
        (0.1, "0.1"),
        (1e-05, "0.00001"),
        (1.5e-05, "0.000015"),
        (-1.2345e-05, "-0.000012345"),
        (1e-06, "0.000001"),
        (1e-07, "1e-7"),
        (2.5e-10, "2.5e-10"),
        (123456.789, "123456.789"),
        (1e21, "1e+21"),
        (1.5e300, "1.5e+300"),
        (-0.0, "0"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (math.nan, "NaN"),
    ],
)
def test_stringify(value, expectedText):
    assert expectedText == stringify(value)


@pytest.mark.parametrize("value", [{}, [1], (1,), b"bytes", object()])
def test_stringify_unsupported(value):
    with pytest.raises(InvalidParameterError):
        stringify(value)


def test_absentIsSingleton():
    assert AbsentType() is Absent
    assert copy(Absent) is Absent
    assert deepcopy(Absent) is Absent
    assert deepcopy({"a": [Absent]})["a"][0] is Absent
    assert pickle.loads(pickle.dumps(Absent)) is Absent


def test_absentIsNotNone():
    assert Absent is not None
    assert not Absent
    assert "Absent" == repr(Absent)
