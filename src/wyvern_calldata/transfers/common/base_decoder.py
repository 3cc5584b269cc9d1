"""
Base Decoder Interface for NFT transfers

This module defines the abstract base class every transfer decoder implements.
Subclasses only describe their tuple signature and how decoded fields map onto
a DecodedTransfer; stripping the selector, the alignment prefix and the call to
the tuple decoder are shared here.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple
import logging

from hexbytes import HexBytes
from web3 import Web3

from ...codec import TupleDecoder, Web3TupleDecoder
from ...constants import ETHABI_DECODE_PREFIX, SELECTOR_SIZE
from ...errors import ArgumentDecodeError
from ..models import DecodedTransfer


def get_function_selector(call_data: HexBytes) -> str:
    """Get first 4 bytes of the calldata (function selector/method ID)"""
    return "0x" + bytes(call_data[:SELECTOR_SIZE]).hex()


class BaseTransferDecoder(ABC):
    """
    Abstract base class for transfer decoders.

    Attributes set by subclasses:
        SIGNATURE: Tuple type signature of the call arguments
        FIELD_COUNT: Number of fields SIGNATURE decodes to
        NEEDS_PREFIX: True when the tuple has dynamic fields and the decode
            alignment prefix must be prepended to the arguments
    """

    SIGNATURE: str = ""
    FIELD_COUNT: int = 0
    NEEDS_PREFIX: bool = False

    def __init__(self, tuple_decoder: Optional[TupleDecoder] = None):
        """
        Initialize the decoder.

        Args:
            tuple_decoder: ABI tuple decode capability, defaults to the web3 codec
        """
        self.tuple_decoder = tuple_decoder or Web3TupleDecoder()
        self.logger = logging.getLogger(self.__class__.__name__)

    def decode(self, target: Optional[str], call_data: HexBytes) -> DecodedTransfer:
        """
        Decode calldata into a transfer.

        Args:
            target: Contract the call was sent to
            call_data: Selector followed by the ABI encoded arguments

        Returns:
            Decoded transfer
        """
        call_data = HexBytes(call_data)
        selector = get_function_selector(call_data)
        fields = self._decode_arguments(call_data)
        return self.build_transfer(selector, target, fields)

    def _decode_arguments(self, call_data: HexBytes) -> Tuple:
        arguments = HexBytes(call_data[SELECTOR_SIZE:])
        if self.NEEDS_PREFIX:
            arguments = HexBytes(ETHABI_DECODE_PREFIX + arguments)

        fields = self.tuple_decoder.decode(self.SIGNATURE, arguments)
        if len(fields) != self.FIELD_COUNT:
            raise ArgumentDecodeError(
                self.SIGNATURE,
                f"expected {self.FIELD_COUNT} fields, got {len(fields)}"
            )
        return fields

    @staticmethod
    def to_address(value) -> str:
        """Normalize a decoded or caller supplied address to checksum format"""
        if isinstance(value, (bytes, bytearray)):
            value = HexBytes(value).hex()
            if not value.startswith("0x"):
                value = "0x" + value
        return Web3.to_checksum_address(value)

    @abstractmethod
    def build_transfer(self, selector: str, target: Optional[str], fields: Tuple) -> DecodedTransfer:
        """
        Map decoded tuple fields to a DecodedTransfer.

        Args:
            selector: Function selector of the call
            target: Contract the call was sent to
            fields: Decoded tuple fields

        Returns:
            Decoded transfer
        """
        pass
