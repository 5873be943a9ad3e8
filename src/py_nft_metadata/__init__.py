"""Typed NFT metadata following the OpenSea metadata standard."""

from py_nft_metadata.builder import MetadataBuilder
from py_nft_metadata.codec import SchemaModel, from_json, to_json
from py_nft_metadata.color import Rgb
from py_nft_metadata.contract import ContractMetadata
from py_nft_metadata.exceptions import MalformedPayload, MissingField, SchemaError, TypeMismatch
from py_nft_metadata.models import (
    AttributeEntry,
    DisplayType,
    FloatAttribute,
    IntegerAttribute,
    Metadata,
    StringAttribute,
    make_attribute,
)

__all__ = [
    "Metadata",
    "MetadataBuilder",
    "ContractMetadata",
    "AttributeEntry",
    "StringAttribute",
    "IntegerAttribute",
    "FloatAttribute",
    "DisplayType",
    "Rgb",
    "SchemaModel",
    "from_json",
    "to_json",
    "make_attribute",
    "SchemaError",
    "MissingField",
    "TypeMismatch",
    "MalformedPayload",
]
