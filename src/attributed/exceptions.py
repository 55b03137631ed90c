"""Custom exception hierarchy for the attributed package."""


class AttributedError(Exception):
    """Base exception for all attributed errors."""


class AttributeTypeError(AttributedError, TypeError):
    """Raised when a payload does not match the kind its key requires."""


class StylesheetError(AttributedError):
    """Raised when a stylesheet cannot be loaded or resolved."""
