import pytest
from eth_abi import encode
from hexbytes import HexBytes
from web3 import Web3

from wyvern_calldata.codec import TupleDecoder

SELLER = "0x1111111111111111111111111111111111111111"
BUYER = "0x2222222222222222222222222222222222222222"
NFT_CONTRACT = "0x" + "ab" * 20
MERKLE_VALIDATOR = "0x" + "cd" * 20


def build_call(selector: str, types, values) -> HexBytes:
    """Selector followed by the ABI encoded arguments, as a contract call carries them"""
    return HexBytes(HexBytes(selector) + encode(types, values))


class StubTupleDecoder(TupleDecoder):
    """Returns a fixed result (or raises) and records what it was asked to decode"""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def decode(self, signature, data):
        self.calls.append((signature, bytes(data)))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def seller():
    return Web3.to_checksum_address(SELLER)


@pytest.fixture
def buyer():
    return Web3.to_checksum_address(BUYER)


@pytest.fixture
def nft_contract():
    return Web3.to_checksum_address(NFT_CONTRACT)


@pytest.fixture
def merkle_validator():
    return Web3.to_checksum_address(MERKLE_VALIDATOR)
