from typing import Any, Dict, Iterable, List, Optional, Union

from py_nft_metadata.color import Rgb
from py_nft_metadata.models import AttributeEntry, DisplayType, Metadata, make_attribute


class MetadataBuilder:
    """
    Field-by-field assembly of a Metadata document.

    Example:
        MetadataBuilder().name("Sword").description("A blade").image("ipfs://abc")
            .attribute("power", 10).build()
    """

    def __init__(self):
        self._fields: Dict[str, Any] = dict()
        self._attributes: Optional[List[AttributeEntry]] = None

    def _set(self, key: str, value: Any) -> "MetadataBuilder":
        self._fields[key] = value
        return self

    def name(self, value: str) -> "MetadataBuilder":
        return self._set("name", value)

    def description(self, value: str) -> "MetadataBuilder":
        return self._set("description", value)

    def image(self, value: str) -> "MetadataBuilder":
        return self._set("image", value)

    def image_data(self, value: str) -> "MetadataBuilder":
        return self._set("image_data", value)

    def external_url(self, value: str) -> "MetadataBuilder":
        return self._set("external_url", value)

    def animation_url(self, value: str) -> "MetadataBuilder":
        return self._set("animation_url", value)

    def youtube_url(self, value: str) -> "MetadataBuilder":
        return self._set("youtube_url", value)

    def background_color(self, value: Union[Rgb, str]) -> "MetadataBuilder":
        """Accepts an Rgb or a six digit hex string."""
        return self._set("background_color", value)

    def attribute(
        self,
        trait_type: str,
        value: Union[str, int, float],
        display_type: Optional[Union[DisplayType, str]] = None,
        max_value: Optional[Union[int, float]] = None,
    ) -> "MetadataBuilder":
        """
        Append a trait; the variant is picked from the type of ``value``.

        Raises:
            TypeMismatch: value is not str/int/float, or a textual trait got a display hint
        """
        entry = make_attribute(trait_type, value, display_type=display_type, max_value=max_value)
        if self._attributes is None:
            self._attributes = list()
        self._attributes.append(entry)
        return self

    def attributes(self, entries: Iterable[AttributeEntry]) -> "MetadataBuilder":
        """Append ready-made entries; an empty iterable still emits an empty ``attributes`` list."""
        if self._attributes is None:
            self._attributes = list()
        self._attributes.extend(entries)
        return self

    def build(self) -> Metadata:
        """
        Raises:
            MissingField: name, description or image was never set
            TypeMismatch: a field holds an incompatible kind of value
        """
        fields = dict(self._fields)
        if self._attributes is not None:
            fields["attributes"] = list(self._attributes)
        return Metadata.build(**fields)
