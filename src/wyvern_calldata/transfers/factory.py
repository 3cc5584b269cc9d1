"""
Transfer Decoder Factory

This module maps function selectors to decode strategies and creates the
matching decoder for a piece of calldata.
"""

import logging
from enum import Enum
from typing import Dict, Optional, Union

from hexbytes import HexBytes

from .. import config
from ..codec import TupleDecoder, Web3TupleDecoder
from ..constants import (
    ERC1155_SAFE_TRANSFER_FROM_SELECTOR,
    ERC721_SAFE_TRANSFER_FROM_SELECTOR,
    MATCH_ERC1155_SAFE_TRANSFER_FROM_SELECTOR,
    MATCH_ERC721_SAFE_TRANSFER_FROM_SELECTOR,
    MATCH_ERC721_TRANSFER_FROM_SELECTOR,
    SELECTOR_SIZE,
    TRANSFER_FROM_SELECTOR,
)
from ..errors import ArgumentDecodeError, UnsupportedSelector
from .common.base_decoder import BaseTransferDecoder, get_function_selector
from .erc721.decoder import ERC721CriteriaDecoder, ERC721TransferDecoder
from .erc1155.decoder import ERC1155CriteriaDecoder, ERC1155TransferDecoder
from .models import DecodedTransfer

logger = logging.getLogger(__name__)


class DecodeStrategy(Enum):
    """The four argument layouts a transfer call can have"""
    ERC721_TRANSFER = "erc721_transfer"
    ERC1155_TRANSFER = "erc1155_transfer"
    ERC721_CRITERIA = "erc721_criteria"
    ERC1155_CRITERIA = "erc1155_criteria"


SELECTOR_TABLE: Dict[str, DecodeStrategy] = {
    TRANSFER_FROM_SELECTOR: DecodeStrategy.ERC721_TRANSFER,
    ERC721_SAFE_TRANSFER_FROM_SELECTOR: DecodeStrategy.ERC721_TRANSFER,
    ERC1155_SAFE_TRANSFER_FROM_SELECTOR: DecodeStrategy.ERC1155_TRANSFER,
    MATCH_ERC721_TRANSFER_FROM_SELECTOR: DecodeStrategy.ERC721_CRITERIA,
    MATCH_ERC721_SAFE_TRANSFER_FROM_SELECTOR: DecodeStrategy.ERC721_CRITERIA,
    MATCH_ERC1155_SAFE_TRANSFER_FROM_SELECTOR: DecodeStrategy.ERC1155_CRITERIA,
}

_DECODER_CLASSES = {
    DecodeStrategy.ERC721_TRANSFER: ERC721TransferDecoder,
    DecodeStrategy.ERC1155_TRANSFER: ERC1155TransferDecoder,
    DecodeStrategy.ERC721_CRITERIA: ERC721CriteriaDecoder,
    DecodeStrategy.ERC1155_CRITERIA: ERC1155CriteriaDecoder,
}


def is_supported_selector(call_data: Union[bytes, str]) -> bool:
    """Check whether calldata starts with one of the decodable transfer selectors"""
    call_data = HexBytes(call_data)
    return len(call_data) >= SELECTOR_SIZE and get_function_selector(call_data) in SELECTOR_TABLE


class TransferDecoderFactory:
    """Factory for transfer decoders with selector based dispatch"""

    def __init__(self, tuple_decoder: Optional[TupleDecoder] = None,
                 fallback_to_erc1155_criteria: Optional[bool] = None):
        """
        Initialize the factory.

        Args:
            tuple_decoder: ABI tuple decode capability shared by all decoders
            fallback_to_erc1155_criteria: Decode unknown selectors as
                matchERC1155UsingCriteria instead of raising UnsupportedSelector.
                Defaults to the UNKNOWN_SELECTOR_FALLBACK setting.
        """
        self.tuple_decoder = tuple_decoder or Web3TupleDecoder()
        if fallback_to_erc1155_criteria is None:
            fallback_to_erc1155_criteria = config.UNKNOWN_SELECTOR_FALLBACK
        self.fallback_to_erc1155_criteria = fallback_to_erc1155_criteria
        self._decoders: Dict[DecodeStrategy, BaseTransferDecoder] = {}

    def resolve_strategy(self, selector: str) -> DecodeStrategy:
        """
        Resolve the decode strategy for a selector.

        Args:
            selector: 0x prefixed 4 byte selector

        Returns:
            DecodeStrategy for the selector
        """
        strategy = SELECTOR_TABLE.get(selector.lower())
        if strategy is not None:
            return strategy

        if self.fallback_to_erc1155_criteria:
            logger.warning(f"Unknown selector {selector}, decoding as matchERC1155UsingCriteria")
            return DecodeStrategy.ERC1155_CRITERIA

        raise UnsupportedSelector(selector)

    def create_decoder(self, strategy: DecodeStrategy) -> BaseTransferDecoder:
        """Return the decoder for a strategy, creating it on first use"""
        decoder = self._decoders.get(strategy)
        if decoder is None:
            decoder = _DECODER_CLASSES[strategy](self.tuple_decoder)
            self._decoders[strategy] = decoder
        return decoder

    def decode_transfer(self, target: Optional[str], call_data: Union[bytes, str]) -> DecodedTransfer:
        """
        Decode an NFT transfer call.

        Args:
            target: Contract the call was sent to (used as the token contract
                for plain ERC721/ERC1155 transfers)
            call_data: Raw calldata, selector included

        Returns:
            Decoded transfer
        """
        call_data = HexBytes(call_data)
        if len(call_data) < SELECTOR_SIZE:
            raise ArgumentDecodeError("calldata", f"{len(call_data)} bytes is shorter than a selector")

        selector = get_function_selector(call_data)
        strategy = self.resolve_strategy(selector)
        logger.debug(f"Decoding {selector} with {strategy.value} strategy")
        return self.create_decoder(strategy).decode(target, call_data)


def decode_transfer(target: Optional[str], call_data: Union[bytes, str],
                    tuple_decoder: Optional[TupleDecoder] = None) -> DecodedTransfer:
    """Decode an NFT transfer call with a default factory"""
    return TransferDecoderFactory(tuple_decoder).decode_transfer(target, call_data)
