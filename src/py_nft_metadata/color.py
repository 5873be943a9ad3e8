"""Background color stored as an ``rrggbb`` hex string on the wire."""

import string

from pydantic import BaseModel, ConfigDict, ValidationError, conint, model_serializer, model_validator

from py_nft_metadata.codec import translate_error
from py_nft_metadata.constants import COLOR_HEX_LENGTH

Component = conint(strict=True, ge=0, le=255)


class Rgb(BaseModel):
    """
    8-bit RGB color.

    Attributes:
        r: Red component.
        g: Green component.
        b: Blue component.
    """

    model_config = ConfigDict(frozen=True)

    r: Component
    g: Component
    b: Component

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise translate_error(e) from e

    @model_validator(mode="before")
    @classmethod
    def parse_hex(cls, v):
        """Parse color from hex string or pass components through."""
        if isinstance(v, str):
            if len(v) != COLOR_HEX_LENGTH or not all(c in string.hexdigits for c in v):
                raise ValueError(f"expected color hex string, got {v!r}")
            return {"r": int(v[0:2], 16), "g": int(v[2:4], 16), "b": int(v[4:6], 16)}
        return v

    @model_serializer
    def serialize_hex(self) -> str:
        return self.to_hex()

    @classmethod
    def from_hex(cls, value: str) -> "Rgb":
        """
        Parse a six digit hex color, e.g. ``f2f2f2``.

        Raises:
            TypeMismatch: value is not exactly six hex digits
        """
        try:
            return cls.model_validate(value)
        except ValidationError as e:
            raise translate_error(e) from e

    def to_hex(self) -> str:
        """Lower-case hex form, e.g. ``f2f2f2``."""
        return f"{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self):
        return self.to_hex()
