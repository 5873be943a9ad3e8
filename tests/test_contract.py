import json

import pytest

from py_nft_metadata import ContractMetadata, MalformedPayload, MissingField, TypeMismatch

CREATURES = {
    "name": "OpenSea Creatures",
    "description": "OpenSea Creatures are adorable aquatic beings primarily for demonstrating what can be done.",
    "image": "external-link-url/image.png",
    "external_link": "external-link-url",
    "seller_fee_basis_points": 100,
    "fee_recipient": "0xA97F337c39cccE66adfeCB2BF99C1DdC54C2D721",
}


def test_decode():
    contract = ContractMetadata.from_json(json.dumps(CREATURES))
    assert contract.seller_fee_basis_points == 100
    assert contract.royalty_percent == 1.0
    assert contract.to_dict() == CREATURES


def test_round_trip():
    contract = ContractMetadata.build(name="x", collaborators=["0x1", "0x2"], seller_fee_basis_points=0)
    assert ContractMetadata.from_json(contract.to_json()) == contract
    assert contract.to_dict() == {"name": "x", "collaborators": ["0x1", "0x2"], "seller_fee_basis_points": 0}


def test_no_fee():
    contract = ContractMetadata.build(name="x")
    assert contract.royalty_percent is None
    assert contract.to_dict() == {"name": "x"}


@pytest.mark.parametrize("fee", [-1, 10001, "100", 2.5])
def test_bad_fee(fee):
    with pytest.raises(TypeMismatch) as e:
        ContractMetadata.build(name="x", seller_fee_basis_points=fee)
    assert e.value.field == "seller_fee_basis_points"


def test_missing_name():
    with pytest.raises(MissingField):
        ContractMetadata.from_json('{"description": "x"}')


def test_malformed():
    with pytest.raises(MalformedPayload):
        ContractMetadata.from_json("{")
