"""JSON encode/decode pair shared by every metadata document."""

import json
from json import JSONDecodeError
from typing import Any, Mapping, Optional, Sequence, Type, TypeVar, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError

from py_nft_metadata.constants import DEFAULT_JSON_INDENT
from py_nft_metadata.exceptions import MalformedPayload, MissingField, SchemaError, TypeMismatch

M = TypeVar("M", bound="SchemaModel")

# Union tags pydantic inserts into error locations
_TAGS = {"string", "integer", "float"}


def error_location(loc: Sequence[Union[str, int]]) -> Optional[str]:
    """
    Build a dotted key path from a pydantic error location.

    Args:
        loc: Location tuple, e.g. ``("attributes", 0, "integer", "value")``

    Returns:
        Dotted path such as ``attributes.0.value`` or None for the document root
    """
    parts = [str(x) for x in loc if x not in _TAGS]
    return ".".join(parts) or None


def translate_error(exc: ValidationError) -> SchemaError:
    """
    Convert a pydantic validation error into the library error taxonomy.

    The first reported problem selects the error class; every problem is kept on ``errors``.
    """
    errors = exc.errors(include_url=False, include_context=False)
    first = errors[0]
    field = error_location(first["loc"])
    kind = MissingField if first["type"] == "missing" else TypeMismatch
    return kind(f"{field or 'payload'}: {first['msg']}", field=field, errors=errors)


class SchemaModel(BaseModel):
    """Immutable record with a JSON wire form."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise translate_error(e) from e

    @classmethod
    def from_dict(cls: Type[M], data: Any) -> M:
        """
        Decode an already parsed JSON tree.

        Unknown keys are ignored.

        Raises:
            MissingField: a required key is absent
            TypeMismatch: a key holds an incompatible kind of value
        """
        if isinstance(data, Mapping):
            unknown = [key for key in data if key not in cls.model_fields]
            if unknown:
                logger.debug(f"Ignoring unknown {cls.__name__} keys: {unknown}")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            error = translate_error(e)
            logger.debug(f"Failed to decode {cls.__name__}: {type(error).__name__} {error}")
            raise error from e

    @classmethod
    def from_json(cls: Type[M], payload: Union[str, bytes]) -> M:
        """
        Decode a JSON document.

        Raises:
            MalformedPayload: the payload is not valid JSON
            MissingField: a required key is absent
            TypeMismatch: a key holds an incompatible kind of value
        """
        try:
            data = json.loads(payload)
        except (JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
            logger.debug(f"Failed to parse {cls.__name__} payload: {e}")
            raise MalformedPayload(f"Payload is not valid JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def build(cls: Type[M], **fields) -> M:
        """Construct a record from keyword fields, raising SchemaError on structural problems."""
        return cls.from_dict(fields)

    def to_dict(self) -> dict:
        """JSON-ready dictionary holding only the populated keys."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self, indent: Optional[int] = DEFAULT_JSON_INDENT) -> str:
        """JSON document holding only the populated keys."""
        return self.model_dump_json(exclude_none=True, indent=indent)


def from_json(model: Type[M], payload: Union[str, bytes]) -> M:
    return model.from_json(payload)


def to_json(document: SchemaModel, indent: Optional[int] = DEFAULT_JSON_INDENT) -> str:
    return document.to_json(indent=indent)
