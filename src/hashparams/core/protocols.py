from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .classes import Diagnostic, URLParts


@runtime_checkable
class LocationProvider(Protocol):
    def getHash(self) -> str:
        pass

    def setHash(self, fragment: str) -> None:
        pass

    def getURLParts(self) -> URLParts:
        pass

    def replaceState(self, state: Any, url: str) -> None:
        pass


@runtime_checkable
class DiagnosticSink(Protocol):
    def __call__(self, diagnostic: Diagnostic) -> None:
        pass
