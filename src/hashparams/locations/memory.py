from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import replace
from typing import Any
from urllib.parse import urljoin, urlsplit

from ..core.classes import HistoryEntry, URLParts
from ..core.errors import HistoryError

logger = logging.getLogger(__name__)


class MemoryLocation:
    """A navigable location that lives in memory.

    It behaves like a browser tab's ``location`` plus ``history``: assigning
    the hash pushes a history entry, ``replaceState()`` rewrites the current
    one, and ``back()``/``forward()`` move through the entries.
    """

    def __init__(self, parts: URLParts | None = None, fragment: str = ""):
        self.parts = parts if parts is not None else URLParts()
        self._fragment = fragment.removeprefix("#")
        self.history: list[HistoryEntry] = [HistoryEntry(url=self.href)]
        self.historyIndex = 0

    @classmethod
    def fromURL(cls, url: str) -> MemoryLocation:
        parts, fragment = _splitURL(url)
        return cls(parts, fragment)

    @property
    def href(self) -> str:
        if self._fragment:
            return self.parts.buildURL(self._fragment)
        return self.parts.origin + self.parts.pathname + self.parts.search

    @property
    def state(self) -> Any:
        return self.history[self.historyIndex].state

    def getHash(self) -> str:
        return "#" + self._fragment if self._fragment else ""

    def setHash(self, fragment: str) -> None:
        fragment = fragment.removeprefix("#")
        if fragment == self._fragment:
            return
        self._fragment = fragment
        del self.history[self.historyIndex + 1 :]
        self.history.append(HistoryEntry(url=self.href))
        self.historyIndex += 1

    def getURLParts(self) -> URLParts:
        return replace(self.parts)

    def replaceState(self, state: Any, url: str) -> None:
        parts, fragment = _splitURL(urljoin(self.href, url))
        if parts.origin != self.parts.origin:
            raise HistoryError(
                f"can't replace history entry with {url!r}: "
                f"origin differs from {self.parts.origin!r}"
            )
        self.parts = parts
        self._fragment = fragment
        self.history[self.historyIndex] = HistoryEntry(
            url=self.href, state=deepcopy(state)
        )

    def back(self) -> None:
        self.go(-1)

    def forward(self) -> None:
        self.go(1)

    def go(self, delta: int) -> None:
        index = self.historyIndex + delta
        if not 0 <= index < len(self.history):
            logger.debug("history navigation out of range: %d", delta)
            return
        self.historyIndex = index
        self.parts, self._fragment = _splitURL(self.history[index].url)


def _splitURL(url: str) -> tuple[URLParts, str]:
    split = urlsplit(url)
    parts = URLParts(
        protocol=split.scheme + ":",
        hostname=split.hostname or "",
        port=str(split.port) if split.port is not None else "",
        pathname=split.path or "/",
        search="?" + split.query if split.query else "",
    )
    return parts, split.fragment
