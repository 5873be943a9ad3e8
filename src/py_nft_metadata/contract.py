"""Collection-level ("contract-level") metadata with royalty information."""

from typing import Optional, Tuple

from pydantic import conint

from py_nft_metadata.codec import SchemaModel
from py_nft_metadata.constants import MAX_FEE_BASIS_POINTS, MIN_FEE_BASIS_POINTS


class ContractMetadata(SchemaModel):
    """
    Metadata describing a whole collection.

    Attributes:
        name: Name of the collection.
        description: Description of the collection.
        image: URL to the collection image.
        banner_image: URL to the banner shown on the collection page.
        featured_image: URL to the image used when the collection is featured.
        external_link: URL to the collection's own site.
        collaborators: Addresses allowed to edit the collection.
        seller_fee_basis_points: Royalty on secondary sales, 100 == 1%.
        fee_recipient: Address receiving the royalty.
    """

    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    banner_image: Optional[str] = None
    featured_image: Optional[str] = None
    external_link: Optional[str] = None
    collaborators: Optional[Tuple[str, ...]] = None
    seller_fee_basis_points: Optional[conint(strict=True, ge=MIN_FEE_BASIS_POINTS, le=MAX_FEE_BASIS_POINTS)] = None
    fee_recipient: Optional[str] = None

    @property
    def royalty_percent(self) -> Optional[float]:
        """Royalty as a percentage, or None when no fee is set."""
        if self.seller_fee_basis_points is None:
            return None
        return self.seller_fee_basis_points / 100
