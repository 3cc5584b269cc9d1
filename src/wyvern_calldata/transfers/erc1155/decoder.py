"""
ERC1155 Transfer Decoders

Both calls carry dynamic fields (bytes, bytes32[]) so their arguments are
decoded with the alignment prefix.
"""

from typing import Optional, Tuple

from ...constants import ERC1155_TRANSFER_SIGNATURE, MATCH_ERC1155_CRITERIA_SIGNATURE
from ...errors import ArgumentDecodeError
from ..common.base_decoder import BaseTransferDecoder
from ..models import DecodedTransfer


class ERC1155TransferDecoder(BaseTransferDecoder):
    """
    Decodes 0xf242432a safeTransferFrom(address,address,uint256,uint256,bytes).
    """

    SIGNATURE = ERC1155_TRANSFER_SIGNATURE
    FIELD_COUNT = 5
    NEEDS_PREFIX = True

    def build_transfer(self, selector: str, target: Optional[str], fields: Tuple) -> DecodedTransfer:
        if target is None:
            raise ArgumentDecodeError(self.SIGNATURE, "target contract is required")

        return DecodedTransfer(
            method_selector=selector,
            from_address=self.to_address(fields[0]),
            to_address=self.to_address(fields[1]),
            token_contract=self.to_address(target),
            token_id=fields[2],
            amount=fields[3]
        )


class ERC1155CriteriaDecoder(BaseTransferDecoder):
    """
    Decodes 0x96809f90 matchERC1155UsingCriteria(address,address,address,uint256,uint256,bytes32,bytes32[]).
    """

    SIGNATURE = MATCH_ERC1155_CRITERIA_SIGNATURE
    FIELD_COUNT = 7
    NEEDS_PREFIX = True

    def build_transfer(self, selector: str, target: Optional[str], fields: Tuple) -> DecodedTransfer:
        return DecodedTransfer(
            method_selector=selector,
            from_address=self.to_address(fields[0]),
            to_address=self.to_address(fields[1]),
            token_contract=self.to_address(fields[2]),
            token_id=fields[3],
            amount=fields[4]
        )
