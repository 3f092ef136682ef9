"""Recoverable failures raised inside the video link services.

None of these escape to the request: the serializer and the form extender
catch them, log, and fall back to an empty mapping or an unchanged schema.
"""


class DecodeFailure(ValueError):
    """Stored video link text could not be decoded into a mapping."""


class UnexpectedValueShape(DecodeFailure):
    """Stored value is neither null, text, nor a mapping."""


class MissingSchemaPath(LookupError):
    """The attribute container is absent from the product form schema."""
