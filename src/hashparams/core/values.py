from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Sequence, Union

from .errors import InvalidParameterError


class AbsentType:
    """The "undefined" value: a key that is present but carries no value.

    There is exactly one instance, ``Absent``. It is falsy and distinct from
    ``None``, which stands for an explicit null.
    """

    def __new__(cls):
        if not hasattr(cls, "instance"):
            cls.instance = super().__new__(cls)
        return cls.instance

    def __repr__(self) -> str:
        return "Absent"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        # copy, deepcopy and pickle all hand back the singleton
        return "Absent"


Absent = AbsentType()

ScalarValue = Union[str, float, bool, None, AbsentType]
ParameterValue = Union[ScalarValue, list[ScalarValue]]
ParameterMap = dict[str, ParameterValue]


_numberPattern = re.compile(r"-?[0-9]+\.?[0-9]*")

_literals: dict[str, ScalarValue] = {
    "true": True,
    "false": False,
    "null": None,
    "undefined": Absent,
}


def typeCast(token: str) -> ScalarValue:
    if _numberPattern.fullmatch(token):
        return float(token)
    return _literals.get(token, token)


def isSequenceValue(value) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def stringify(value) -> str:
    """Render a scalar the way a browser's ``String()`` would, so the text
    survives ``typeCast`` as the same type where the type has a literal form.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if value is Absent:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        text = repr(value)
        if 1e-6 <= abs(value) < 1e21:
            # positional notation, from the shortest round-tripping digits
            return format(Decimal(text), "f")
        mantissa, _, exponent = text.partition("e")
        return f"{mantissa}e{int(exponent):+d}"
    raise InvalidParameterError(
        f"unsupported parameter value {value!r} ({type(value).__name__})"
    )
