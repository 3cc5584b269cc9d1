"""
NFT Transfer Decoding Package

Decodes the ERC721/ERC1155 transfer calls a Wyvern match forwards to its
target contract into DecodedTransfer records.

Usage:
    from wyvern_calldata.transfers import TransferDecoderFactory

    factory = TransferDecoderFactory()
    transfer = factory.decode_transfer(target, call_data)
"""

from .factory import (
    SELECTOR_TABLE,
    DecodeStrategy,
    TransferDecoderFactory,
    decode_transfer,
    is_supported_selector,
)
from .models import DecodedTransfer
from .common.base_decoder import BaseTransferDecoder, get_function_selector
from .erc721.decoder import ERC721TransferDecoder, ERC721CriteriaDecoder
from .erc1155.decoder import ERC1155TransferDecoder, ERC1155CriteriaDecoder

__all__ = [
    'SELECTOR_TABLE',
    'DecodeStrategy',
    'TransferDecoderFactory',
    'decode_transfer',
    'is_supported_selector',
    'DecodedTransfer',
    'BaseTransferDecoder',
    'get_function_selector',
    'ERC721TransferDecoder',
    'ERC721CriteriaDecoder',
    'ERC1155TransferDecoder',
    'ERC1155CriteriaDecoder'
]
