"""Exception types raised by boxkit."""


class BoxkitError(Exception):
    """Base class for all boxkit errors."""


class InvalidRegionError(BoxkitError, ValueError):
    """Raised by the host when asked to materialize a region with negative size."""


class GridUndefinedError(BoxkitError, RuntimeError):
    """Raised when a grid cell is requested before any grid was defined."""


class UnknownFontError(BoxkitError, KeyError):
    """Raised when a font family or style was never registered."""
