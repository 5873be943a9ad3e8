"""Exceptions raised while decoding or constructing metadata."""

from typing import List, Optional


class SchemaError(Exception):
    """Base class for every metadata schema failure."""

    field: Optional[str] = None
    errors: List[dict]

    def __init__(self, message: str, field: Optional[str] = None, errors: List[dict] = None):
        """
        Initialize schema error.

        Args:
            message: Human-readable error message
            field: Dotted location of the offending key, e.g. ``attributes.0.value``
            errors: Raw error details as reported by the validator
        """
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or list()


class MissingField(SchemaError):
    """
    A required key is absent from the payload
    """

    pass


class TypeMismatch(SchemaError):
    """
    A key is present but holds an incompatible kind of value,
    e.g. an object where a primitive trait value was expected
    """

    pass


class MalformedPayload(SchemaError):
    """
    The payload is not well-formed JSON
    """

    pass
