from __future__ import annotations

import logging
from copy import deepcopy
from typing import Mapping, Optional

from .classes import Diagnostic, SynchronizerOptions
from .codec import SEGMENT_SEPARATOR, decode, encode, getViewPath
from .protocols import DiagnosticSink, LocationProvider
from .values import ParameterMap

logger = logging.getLogger(__name__)


class LocationSynchronizer:
    """Reads parameters from, and commits them to, a location's fragment.

    Nothing is cached: every read looks at the location again, and every
    write re-splits the fragment as it is at that moment, so that the view
    path (the segments that are not ``key:value`` pairs) survives whatever
    happened to it in between.
    """

    def __init__(
        self,
        location: LocationProvider,
        options: Optional[SynchronizerOptions] = None,
        onDiagnostic: Optional[DiagnosticSink] = None,
    ):
        self.location = location
        self.options = options if options is not None else SynchronizerOptions()
        self.onDiagnostic = onDiagnostic

    def readFragment(self) -> str:
        return self.location.getHash().removeprefix("#")

    def readParams(self) -> ParameterMap:
        return decode(self.readFragment(), onIgnored=self._ignoredSegment)

    def readViewPath(self) -> str:
        return getViewPath(self.readFragment())

    def writeParams(self, params: Optional[Mapping] = None) -> str:
        paramString = encode(params)
        newFragment = self.readViewPath() + SEGMENT_SEPARATOR + paramString

        parts = self.location.getURLParts()
        fullURL = parts.buildURL(newFragment)
        if len(fullURL) > self.options.maxURLLength:
            self._emit(
                logging.WARNING,
                Diagnostic(
                    kind="urlTooLong",
                    message=f"The URL is {len(fullURL)} characters long. It exceeds "
                    f"the {self.options.maxURLLength} character limit.",
                    detail={"length": len(fullURL)},
                ),
            )

        state = deepcopy(dict(params)) if params else {}
        try:
            self.location.replaceState(
                state, parts.buildURL(newFragment, absolute=False)
            )
        except Exception as e:
            self._emit(
                logging.ERROR,
                Diagnostic(
                    kind="historyFallback",
                    message="replacing the history entry failed, "
                    f"assigning the fragment instead: {e!r}",
                    detail={"error": repr(e)},
                ),
            )
            self.location.setHash(newFragment)
        return newFragment

    def _ignoredSegment(self, segment: str) -> None:
        self._emit(
            logging.DEBUG,
            Diagnostic(
                kind="ignoredSegment",
                message=f"ignoring non-parameter segment {segment!r}",
                detail={"segment": segment},
            ),
        )

    def _emit(self, level: int, diagnostic: Diagnostic) -> None:
        logger.log(level, diagnostic.message)
        if self.onDiagnostic is not None:
            self.onDiagnostic(diagnostic)
