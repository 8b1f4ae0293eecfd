"""Exception hierarchy for Shapesmith."""


class ShapesmithError(Exception):
    """Base exception for all Shapesmith errors."""

    pass


class GenerationError(ShapesmithError):
    """Errors that prevent an image from being generated."""

    pass


class InvalidSizeError(GenerationError):
    """Requested image size has a zero (or negative) side."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Invalid image size {width}x{height}")


class InvalidParameterError(GenerationError):
    """A shape parameter is out of range or unsupported."""

    def __init__(self, parameter: str, reason: str) -> None:
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"Invalid parameter '{parameter}': {reason}")


class RenderingUnavailableError(GenerationError):
    """The backing canvas could not be acquired."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Rendering unavailable: {reason}")


class FontError(ShapesmithError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class ImageSaveError(ShapesmithError):
    """Error writing a generated image to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save image '{path}': {reason}")
