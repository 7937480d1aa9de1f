try:
    from ._version import version as __version__
except ImportError:
    # not installed; setuptools_scm writes _version.py at build time
    __version__ = "0.0.0"

from .core.classes import Diagnostic, HistoryEntry, SynchronizerOptions, URLParts
from .core.codec import createLink, decode, encode, getViewPath
from .core.errors import HistoryError, InvalidParameterError
from .core.protocols import DiagnosticSink, LocationProvider
from .core.store import ParameterStore
from .core.synchronizer import LocationSynchronizer
from .core.values import Absent, ParameterMap, ParameterValue, typeCast
from .locations.memory import MemoryLocation

__all__ = [
    "Absent",
    "Diagnostic",
    "DiagnosticSink",
    "HistoryEntry",
    "HistoryError",
    "InvalidParameterError",
    "LocationProvider",
    "LocationSynchronizer",
    "MemoryLocation",
    "ParameterMap",
    "ParameterStore",
    "ParameterValue",
    "SynchronizerOptions",
    "URLParts",
    "createLink",
    "decode",
    "encode",
    "getViewPath",
    "typeCast",
]
