class ConversionError(Exception):
    """Base class of every error raised while converting an SP1 proof"""


class MalformedProofError(ConversionError):
    """Raw proof has the wrong length or contains non-hex characters"""


class FixtureReadError(ConversionError):
    """Fixture file is missing, is not valid JSON or lacks a required field"""


class SerializationError(ConversionError):
    """Converted structures could not be rendered or written"""


class InvalidFieldElementError(ConversionError):
    """Value cannot be represented as an unsigned integer"""
