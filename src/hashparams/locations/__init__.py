from .memory import MemoryLocation

__all__ = ["MemoryLocation"]
