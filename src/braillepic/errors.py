class BraillepicError(Exception):
    """Base class for errors raised by braillepic."""


class InvalidHexFormat(BraillepicError, ValueError):
    """A hex colour literal is not 3 or 6 hex digits (after an optional '#')."""


class DegenerateDimensions(BraillepicError, ValueError):
    """The output grid resolved to zero cells on at least one axis."""


class ConfigurationError(BraillepicError, ValueError):
    """A render option is outside its allowed range."""
