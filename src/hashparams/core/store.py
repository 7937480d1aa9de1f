from __future__ import annotations

from typing import Mapping, Optional

from . import codec
from .classes import SynchronizerOptions
from .errors import InvalidParameterError
from .protocols import DiagnosticSink, LocationProvider
from .synchronizer import LocationSynchronizer
from .values import Absent, ParameterMap, ParameterValue, isSequenceValue


class ParameterStore:
    """Typed parameters kept in the ``key:value`` segments of a location's
    fragment.

    Every accessor decodes the fragment afresh, and every mutator writes the
    complete parameter set back, leaving the view path segments in place.
    """

    def __init__(
        self,
        location: LocationProvider,
        *,
        options: Optional[SynchronizerOptions] = None,
        onDiagnostic: Optional[DiagnosticSink] = None,
    ):
        self.synchronizer = LocationSynchronizer(location, options, onDiagnostic)

    @property
    def location(self) -> LocationProvider:
        return self.synchronizer.location

    def has(self, key: str) -> bool:
        # True for keys without a value ("" or Absent) as well
        return key in self.getAll()

    def get(self, key: str) -> ParameterValue:
        return self.getAll().get(key, Absent)

    def set(self, key: str, value: ParameterValue) -> None:
        params = self.getAll()
        params[key] = value
        self.setAll(params)

    def getArray(self, key: str) -> list:
        params = self.getAll()
        if key not in params:
            return []
        value = params[key]
        if value == "":
            return []
        if isSequenceValue(value):
            return list(value)
        return [value]

    def setArray(self, key: str, value) -> None:
        if not isSequenceValue(value):
            raise InvalidParameterError(
                f"value for {key!r} is not a sequence: {value!r} "
                f"({type(value).__name__})"
            )
        self.set(key, value)

    def remove(self, key: str) -> ParameterValue:
        params = self.getAll()
        value = params.pop(key, Absent)
        self.setAll(params)
        return value

    def update(self, changes: Mapping) -> None:
        params = self.getAll()
        params.update(changes)
        self.setAll(params)

    def getAll(self) -> ParameterMap:
        return self.synchronizer.readParams()

    def setAll(self, params: Optional[Mapping] = None) -> None:
        self.synchronizer.writeParams(params)

    def removeAll(self) -> None:
        self.setAll()

    clear = removeAll

    def createParamString(self, params: Optional[Mapping] = None) -> str:
        return codec.encode(params)

    def createLink(self, path: str, params: Optional[Mapping] = None) -> str:
        return codec.createLink(path, params)
