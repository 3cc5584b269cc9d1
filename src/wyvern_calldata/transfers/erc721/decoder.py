"""
ERC721 Transfer Decoders

Handles plain ERC721 transfers and the criteria-matched variants of the
Wyvern merkle validator.
"""

from typing import Optional, Tuple

from ...constants import ERC721_TRANSFER_SIGNATURE, MATCH_ERC721_CRITERIA_SIGNATURE
from ...errors import ArgumentDecodeError
from ..common.base_decoder import BaseTransferDecoder
from ..models import DecodedTransfer


class ERC721TransferDecoder(BaseTransferDecoder):
    """
    Decodes transferFrom/safeTransferFrom calls.

    0x23b872dd transferFrom(address,address,uint256)
    0x42842e0e safeTransferFrom(address,address,uint256)

    The token contract is the call target; the arguments do not name it.
    """

    SIGNATURE = ERC721_TRANSFER_SIGNATURE
    FIELD_COUNT = 3
    NEEDS_PREFIX = False

    def build_transfer(self, selector: str, target: Optional[str], fields: Tuple) -> DecodedTransfer:
        if target is None:
            raise ArgumentDecodeError(self.SIGNATURE, "target contract is required")

        return DecodedTransfer(
            method_selector=selector,
            from_address=self.to_address(fields[0]),
            to_address=self.to_address(fields[1]),
            token_contract=self.to_address(target),
            token_id=fields[2],
            amount=1
        )


class ERC721CriteriaDecoder(BaseTransferDecoder):
    """
    Decodes matchERC721UsingCriteria/matchERC721WithSafeTransferUsingCriteria calls.

    0xfb16a595 matchERC721UsingCriteria(address,address,address,uint256,bytes32,bytes32[])
    0xc5a0236e matchERC721WithSafeTransferUsingCriteria(address,address,address,uint256,bytes32,bytes32[])
    """

    SIGNATURE = MATCH_ERC721_CRITERIA_SIGNATURE
    FIELD_COUNT = 6
    NEEDS_PREFIX = True

    def build_transfer(self, selector: str, target: Optional[str], fields: Tuple) -> DecodedTransfer:
        # target is the merkle validator here, the NFT contract travels in the payload
        return DecodedTransfer(
            method_selector=selector,
            from_address=self.to_address(fields[0]),
            to_address=self.to_address(fields[1]),
            token_contract=self.to_address(fields[2]),
            token_id=fields[3],
            amount=1
        )
