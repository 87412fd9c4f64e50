class StraightAheadError(Exception):
    """Base exception for the Straight Ahead project."""


class InvalidDirectionError(StraightAheadError, ValueError):
    """Raised when a value cannot be read as one of the four cardinal directions."""


class OutOfBoundsError(StraightAheadError, IndexError):
    """Raised when a grid cell outside the configured dimensions is addressed."""


class LayoutError(StraightAheadError):
    """Raised when a layout file or mapping is malformed."""


class CommandError(StraightAheadError, ValueError):
    """Raised when a headless command script cannot be parsed."""
