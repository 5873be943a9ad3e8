"""Token metadata following the marketplace (OpenSea) metadata convention."""

from enum import Enum
from typing import Annotated, Any, Optional, Tuple, Union

from pydantic import BaseModel, Discriminator, StrictInt, Tag, confloat

from py_nft_metadata.codec import SchemaModel
from py_nft_metadata.color import Rgb
from py_nft_metadata.constants import (
    DISPLAY_BOOST_NUMBER,
    DISPLAY_BOOST_PERCENTAGE,
    DISPLAY_DATE,
    DISPLAY_NUMBER,
)
from py_nft_metadata.exceptions import TypeMismatch

FiniteFloat = confloat(strict=True, allow_inf_nan=False)


class DisplayType(str, Enum):
    """How a numerical trait should be displayed."""

    NUMBER = DISPLAY_NUMBER
    BOOST_NUMBER = DISPLAY_BOOST_NUMBER
    BOOST_PERCENTAGE = DISPLAY_BOOST_PERCENTAGE
    DATE = DISPLAY_DATE  # value is a unix timestamp


class StringAttribute(SchemaModel):
    """Textual trait, e.g. ``{"trait_type": "Base", "value": "Starfish"}``."""

    trait_type: str
    value: str


class IntegerAttribute(SchemaModel):
    """
    Integer trait.

    Attributes:
        trait_type: Name of the trait.
        value: Value of the trait.
        display_type: How the value should be displayed.
        max_value: Upper bound shown next to the value.
    """

    trait_type: str
    value: StrictInt
    display_type: Optional[DisplayType] = None
    max_value: Optional[StrictInt] = None


class FloatAttribute(SchemaModel):
    """
    Floating-point trait.

    Attributes:
        trait_type: Name of the trait.
        value: Value of the trait.
        display_type: How the value should be displayed.
        max_value: Upper bound shown next to the value.
    """

    trait_type: str
    value: FiniteFloat
    display_type: Optional[DisplayType] = None
    max_value: Optional[FiniteFloat] = None


_TAG_BY_CLASS = {
    StringAttribute: "string",
    IntegerAttribute: "integer",
    FloatAttribute: "float",
}


def attribute_tag(entry: Any) -> Optional[str]:
    """
    Select the attribute variant from the JSON kind of ``value``.

    Entries without a ``value`` key go to the textual variant so the missing key is reported.
    """
    if isinstance(entry, BaseModel):
        return _TAG_BY_CLASS.get(type(entry))
    if not isinstance(entry, dict) or "value" not in entry:
        return "string"
    value = entry["value"]
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return "string"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    return None


AttributeEntry = Annotated[
    Union[
        Annotated[StringAttribute, Tag("string")],
        Annotated[IntegerAttribute, Tag("integer")],
        Annotated[FloatAttribute, Tag("float")],
    ],
    Discriminator(
        attribute_tag,
        custom_error_type="attribute_value_type",
        custom_error_message="Trait value should be a string, an integer or a float",
    ),
]


def make_attribute(
    trait_type: str,
    value: Union[str, int, float],
    display_type: Optional[Union[DisplayType, str]] = None,
    max_value: Optional[Union[int, float]] = None,
) -> Union[StringAttribute, IntegerAttribute, FloatAttribute]:
    """
    Build the attribute variant matching the Python type of ``value``.

    Raises:
        TypeMismatch: value is not str/int/float, or a textual trait got a display hint
    """
    if isinstance(value, bool):
        raise TypeMismatch("Trait value should be a string, an integer or a float", field="value")
    if isinstance(value, str):
        if display_type is not None or max_value is not None:
            raise TypeMismatch("Textual traits take no display_type or max_value", field="display_type")
        return StringAttribute.build(trait_type=trait_type, value=value)

    hints = {"display_type": display_type, "max_value": max_value}
    hints = {k: v for k, v in hints.items() if v is not None}
    if isinstance(value, int):
        return IntegerAttribute.build(trait_type=trait_type, value=value, **hints)
    if isinstance(value, float):
        return FloatAttribute.build(trait_type=trait_type, value=value, **hints)
    raise TypeMismatch(f"Unsupported trait value type: {type(value).__name__}", field="value")


class Metadata(SchemaModel):
    """
    Metadata for a single token.

    Only ``name``, ``description`` and ``image`` are required. URLs are kept as plain
    strings; nothing here checks that they are well formed or reachable.

    Attributes:
        name: Name of the item.
        description: Human-readable description of the item.
        image: URL to the image of the item, e.g. ``ipfs://...``.
        image_data: Raw SVG image data, used when the image is generated on the fly.
        external_url: URL to the item on another site.
        animation_url: URL to a multi-media attachment for the item.
        youtube_url: URL to a YouTube video.
        background_color: Background color of the item.
        attributes: Traits of the item, in display order.
    """

    name: str
    description: str
    image: str
    image_data: Optional[str] = None
    external_url: Optional[str] = None
    animation_url: Optional[str] = None
    youtube_url: Optional[str] = None
    background_color: Optional[Rgb] = None
    attributes: Optional[Tuple[AttributeEntry, ...]] = None

    def trait(self, trait_type: str) -> Optional[Union[StringAttribute, IntegerAttribute, FloatAttribute]]:
        """First attribute with the given trait type, or None."""
        for entry in self.attributes or ():
            if entry.trait_type == trait_type:
                return entry
        return None
