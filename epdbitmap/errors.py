from __future__ import annotations


class BitmapError(Exception):
    """Base class for conversion failures."""


class MissingInputError(BitmapError, ValueError):
    """A required image was not supplied."""


class InvalidFrameCountError(BitmapError, ValueError):
    """Blending needs at least two frames."""


class EmptyImageError(BitmapError, ValueError):
    """Image width or height is not positive."""


class DecodeFailureError(BitmapError, RuntimeError):
    """The image decoder could not produce pixel data."""
