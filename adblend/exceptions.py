"""Custom exceptions for the AdBlend application."""


class AdBlendError(Exception):
    """Base class for errors raised by AdBlend."""
    pass


class ConfigurationError(AdBlendError):
    """Raised when a required setting (such as the Gemini API key) is missing."""
    pass


class InvalidDataUriError(AdBlendError, ValueError):
    """Raised when a string is not a ``data:<mimetype>;base64,<payload>`` URI."""
    pass


class ImageGenerationError(AdBlendError):
    """Raised when the image model answers without an image."""

    DEFAULT_MESSAGE = "Image generation failed. Please try again."

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)
        self.message = message
