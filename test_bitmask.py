"""
Tests for the guarded array replace used to merge buy and sell calldata
"""

import pytest
from hexbytes import HexBytes

from conftest import BUYER, NFT_CONTRACT, SELLER, build_call
from wyvern_calldata.codec import guarded_array_replace
from wyvern_calldata.errors import MaskLengthMismatch
from wyvern_calldata.transfers import decode_transfer

ARRAY = HexBytes("0x00ff00ff12")
REPLACEMENT = HexBytes("0xabcdef0134")


def test_empty_mask_returns_array():
    assert guarded_array_replace(ARRAY, REPLACEMENT, b'') == ARRAY


def test_empty_mask_ignores_replacement_length():
    assert guarded_array_replace(ARRAY, b'\x01', "0x") == ARRAY


def test_all_ones_mask_over_blank_array_returns_replacement():
    blank = b'\x00' * len(REPLACEMENT)

    assert guarded_array_replace(blank, REPLACEMENT, b'\xff' * len(REPLACEMENT)) == REPLACEMENT


def test_all_zeros_mask_returns_array():
    assert guarded_array_replace(ARRAY, REPLACEMENT, b'\x00' * len(ARRAY)) == ARRAY


def test_partial_mask_only_touches_masked_bytes():
    array = HexBytes("0x11000033")
    replacement = HexBytes("0xffaabbff")
    mask = HexBytes("0x00ff0f00")

    assert guarded_array_replace(array, replacement, mask) == HexBytes("0x11aa0b33")


def test_array_bits_under_mask_are_kept():
    # bits already set in array survive even where the mask selects replacement
    assert guarded_array_replace("0x00ff", "0xff00", "0xffff") == HexBytes("0xffff")
    assert guarded_array_replace("0x0f", "0xf0", "0xff") == HexBytes("0xff")


def test_leading_zero_bytes_keep_their_width():
    merged = guarded_array_replace(b'\x00\x00\x01', b'\x00\x00\x00', b'\x00\x00\x00')

    assert merged == HexBytes(b'\x00\x00\x01')
    assert len(merged) == 3


def test_mismatched_lengths_raise():
    with pytest.raises(MaskLengthMismatch):
        guarded_array_replace(b'\x00\x00', b'\x00', b'\xff\xff')


def test_merges_wyvern_buy_and_sell_calldata():
    types = ['address', 'address', 'uint256']
    zero = "0x" + "00" * 20
    # The buyer leaves "from" open, the seller leaves "to" open
    buy = build_call("0x23b872dd", types, [zero, BUYER, 77])
    sell = build_call("0x23b872dd", types, [SELLER, zero, 77])
    replacement_pattern = HexBytes(b'\x00' * 4 + b'\xff' * 32 + b'\x00' * 64)

    merged = guarded_array_replace(buy, sell, replacement_pattern)
    transfer = decode_transfer(NFT_CONTRACT, merged)

    assert merged == build_call("0x23b872dd", types, [SELLER, BUYER, 77])
    assert transfer.from_address.lower() == SELLER
    assert transfer.to_address.lower() == BUYER
