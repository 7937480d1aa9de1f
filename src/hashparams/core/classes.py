from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import cattrs

from .values import AbsentType


@dataclass(kw_only=True)
class URLParts:
    protocol: str = "http:"
    hostname: str = "localhost"
    port: str = ""
    pathname: str = "/"
    search: str = ""

    @property
    def host(self) -> str:
        return f"{self.hostname}:{self.port}" if self.port else self.hostname

    @property
    def origin(self) -> str:
        return f"{self.protocol}//{self.host}"

    def buildURL(self, fragment: str, *, absolute: bool = True) -> str:
        # fragment excludes the leading "#"
        relative = f"{self.pathname}{self.search}#{fragment}"
        return self.origin + relative if absolute else relative


@dataclass(kw_only=True)
class HistoryEntry:
    url: str
    state: Optional[dict[str, Any]] = None


@dataclass(kw_only=True)
class Diagnostic:
    kind: str  # "ignoredSegment", "urlTooLong" or "historyFallback"
    message: str
    detail: dict[str, Any] = field(default_factory=dict)


@dataclass(kw_only=True)
class SynchronizerOptions:
    maxURLLength: int = 2000


_cattrsConverter = cattrs.Converter()

# Absent has no JSON form; it is reported as null
_cattrsConverter.register_unstructure_hook(AbsentType, lambda value: None)


def structure(obj, cls):
    return _cattrsConverter.structure(obj, cls)


def unstructure(obj):
    return _cattrsConverter.unstructure(obj)
