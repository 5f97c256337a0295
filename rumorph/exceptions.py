"""
Exceptions raised by rumorph.

Analysis never raises on valid text: an unknown word simply produces
empty result lists. Errors only come from loading the dictionary or
from using the module-level API before a dictionary was loaded.
"""


class MorphError(Exception):
    """Base class for rumorph errors."""
    pass


class DictionaryError(MorphError):
    """Raised when a dictionary resource is missing or malformed."""
    pass


class AlreadyInitializedError(MorphError):
    """Raised when loading a dictionary while one is already loaded."""
    pass


class NotInitializedError(MorphError):
    """Raised when analyzing before a dictionary was loaded."""
    pass
