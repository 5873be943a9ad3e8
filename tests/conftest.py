import pytest

from py_nft_metadata import IntegerAttribute, Metadata, MetadataBuilder, StringAttribute


@pytest.fixture
def sword_payload() -> dict:
    return {
        "name": "Sword",
        "description": "A blade",
        "image": "ipfs://abc",
        "attributes": [
            {"trait_type": "power", "value": 10},
        ],
    }


@pytest.fixture
def sword() -> Metadata:
    return (
        MetadataBuilder()
        .name("Sword")
        .description("A blade")
        .image("ipfs://abc")
        .attribute("power", 10)
        .build()
    )


@pytest.fixture
def dave() -> Metadata:
    return Metadata(
        name="Dave Starbelly",
        description="Friendly OpenSea Creature that enjoys long swims in the ocean.",
        image="https://storage.googleapis.com/opensea-prod.appspot.com/puffs/3.png",
        external_url="https://openseacreatures.io/3",
        background_color="f2f2f2",
        attributes=[
            StringAttribute(trait_type="Base", value="Starfish"),
            StringAttribute(trait_type="Eyes", value="Big"),
            IntegerAttribute(trait_type="Level", value=5),
            {"trait_type": "Stamina", "value": 1.4},
            {"trait_type": "Aqua Power", "value": 40, "display_type": "boost_number"},
            {"trait_type": "Stamina Increase", "value": 10, "display_type": "boost_percentage"},
            {"trait_type": "Generation", "value": 2, "display_type": "number", "max_value": 10},
            {"trait_type": "birthday", "value": 1546360800, "display_type": "date"},
        ],
    )
