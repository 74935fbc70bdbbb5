"""Exceptions raised by the gaming room registry."""


class GamingRoomError(Exception):
    """Base class for all errors raised on purpose by this package."""


class InvalidLookupKeyError(GamingRoomError, TypeError):
    """A lookup was attempted with a key that is neither an id (int) nor a name (str)."""


class ConfigurationError(GamingRoomError, ValueError):
    """An environment setting could not be interpreted."""
